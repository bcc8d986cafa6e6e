"""Port for platform session services that can inhibit idle."""

from abc import ABC, abstractmethod


class InhibitService(ABC):
    """A desktop session service able to keep the screen from locking."""

    name: str = "unnamed"

    @abstractmethod
    def inhibit(self, application_name: str, reason: str) -> int | None:
        """Ask the service to inhibit idle.

        Returns:
            The cookie to release the inhibition with, or None when the
            service is unavailable or refused.
        """
        ...

    @abstractmethod
    def uninhibit(self, cookie: int) -> None:
        """Release an inhibition obtained from :meth:`inhibit`."""
        ...
