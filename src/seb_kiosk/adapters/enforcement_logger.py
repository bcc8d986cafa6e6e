"""Enforcement reporter that writes blocked actions to the log."""

import logging
from collections import Counter

from seb_kiosk.domain.models.enforcement_event import EnforcementEvent, EnforcementKind

logger = logging.getLogger(__name__)


class LoggingEnforcementReporter:
    """Logs each enforcement event and counts them per kind."""

    def __init__(self) -> None:
        self._counts: Counter[EnforcementKind] = Counter()

    def report(self, event: EnforcementEvent) -> None:
        self._counts[event.kind] += 1
        message = f"Enforcement: blocked {event.kind} {event.target}"
        if event.detail and event.detail != event.target:
            message += f" ({event.detail})"
        logger.warning(message)

    def counts(self) -> dict[EnforcementKind, int]:
        """Number of events seen so far, by kind."""
        return dict(self._counts)

    def total(self) -> int:
        return sum(self._counts.values())
