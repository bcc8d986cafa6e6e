"""Protocols for the keep-alive fallback of idle inhibition."""

from collections.abc import Callable
from typing import Protocol


class KeepAliveActionProtocol(Protocol):
    """Work done on every keep-alive tick."""

    def __call__(self) -> None: ...


class KeepAliveTimerProtocol(Protocol):
    """A repeating timer driven by the host event loop."""

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        """Start firing ``callback`` every ``interval_ms`` milliseconds."""
        ...

    def stop(self) -> None:
        """Stop the timer. Safe to call when it is not running."""
        ...

    def is_active(self) -> bool:
        """Return True while the timer is running."""
        ...
