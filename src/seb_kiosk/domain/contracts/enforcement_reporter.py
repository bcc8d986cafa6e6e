"""Protocol for reporting blocked actions."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from seb_kiosk.domain.models.enforcement_event import EnforcementEvent


class EnforcementReporterProtocol(Protocol):
    """Receives every enforcement event for operator visibility."""

    def report(self, event: "EnforcementEvent") -> None:
        """Record an enforcement event.

        Args:
            event: The blocked action.
        """
        ...
