"""Best-effort idle inhibition across desktop environments.

``start()`` tries each platform service in priority order and keeps the
cookie of the first one that answers. If none does, a repeating keep-alive
timer runs instead. ``stop()`` releases whichever mechanism is active.
"""

import logging
from collections.abc import Sequence

from seb_kiosk.domain.contracts.keep_alive import KeepAliveActionProtocol, KeepAliveTimerProtocol
from seb_kiosk.domain.ports.inhibit_service import InhibitService

logger = logging.getLogger(__name__)

KEEP_ALIVE_INTERVAL_MS = 30_000
INHIBIT_REASON = "Safe Exam Browser - preventing idle during exam"


class IdleInhibitor:
    """Idle -> Inhibiting -> Idle. Both transitions are idempotent."""

    def __init__(
        self,
        services: Sequence[InhibitService],
        timer: KeepAliveTimerProtocol,
        keep_alive: KeepAliveActionProtocol,
        application_name: str = "seb-linux",
    ) -> None:
        self._services = tuple(services)
        self._timer = timer
        self._keep_alive = keep_alive
        self._application_name = application_name
        self._is_inhibiting = False
        self._active_service: InhibitService | None = None
        self._cookie: int | None = None

    @property
    def is_inhibiting(self) -> bool:
        return self._is_inhibiting

    @property
    def active_service(self) -> InhibitService | None:
        """The platform service holding the inhibition, or None when using the timer."""
        return self._active_service

    @property
    def cookie(self) -> int | None:
        return self._cookie

    def start(self) -> None:
        if self._is_inhibiting:
            return

        logger.info("Starting idle inhibition")
        for service in self._services:
            try:
                cookie = service.inhibit(self._application_name, INHIBIT_REASON)
            except Exception:
                logger.exception(f"Idle inhibition via {service.name} failed")
                continue
            if cookie is not None:
                self._active_service = service
                self._cookie = cookie
                self._is_inhibiting = True
                logger.info(f"Idle inhibition active via {service.name}, cookie: {cookie}")
                return

        if not self._timer.is_active():
            self._timer.start(KEEP_ALIVE_INTERVAL_MS, self._tick)
            self._tick()
        self._is_inhibiting = True
        logger.info("Idle inhibition active via keep-alive timer")

    def stop(self) -> None:
        if not self._is_inhibiting:
            return

        logger.info("Stopping idle inhibition")
        if self._active_service is not None and self._cookie is not None:
            try:
                self._active_service.uninhibit(self._cookie)
            except Exception:
                logger.exception(f"Releasing idle inhibition via {self._active_service.name} failed")
            self._active_service = None
            self._cookie = None

        if self._timer.is_active():
            self._timer.stop()

        self._is_inhibiting = False

    def _tick(self) -> None:
        try:
            self._keep_alive()
        except Exception:
            logger.exception("Keep-alive action failed")
