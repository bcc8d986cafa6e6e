"""Navigation-level enforcement for top-level page transitions.

Request-level blocking in :mod:`seb_kiosk.application.request_gate` is the
primary control. This gate re-checks full-page transitions, which are what a
user can trigger directly, and turns a refusal into a visible block page. It
also refuses popups and print requests.
"""

import logging

from seb_kiosk.application.block_page import render_block_page
from seb_kiosk.application.domain_matcher import HostFilter
from seb_kiosk.domain.contracts.enforcement_reporter import EnforcementReporterProtocol
from seb_kiosk.domain.models.enforcement_event import EnforcementEvent, EnforcementKind
from seb_kiosk.domain.models.navigation import NavigationDecision, NavigationRequest
from seb_kiosk.domain.models.policy import Policy

logger = logging.getLogger(__name__)

# Installed once per page load. Advisory only: devtools can undo it.
PAGE_HARDENING_SCRIPT = (
    "document.addEventListener('contextmenu', function(e) { e.preventDefault(); return false; });"
    "document.addEventListener('selectstart', function(e) { e.preventDefault(); return false; });"
)

_ACCEPT = NavigationDecision(accepted=True)


class NavigationGate:
    """Decides main-frame navigations, popups and print requests."""

    def __init__(self, policy: Policy, reporter: EnforcementReporterProtocol) -> None:
        self._filter = HostFilter(policy.allowed_domains)
        self._start_url = policy.start_url
        self._reporter = reporter

    @property
    def start_url(self) -> str:
        return self._start_url

    def check(self, request: NavigationRequest) -> NavigationDecision:
        """Check a navigation attempt.

        Sub-frame navigations and host-less URLs (internal pages) always pass.
        """
        if not request.is_main_frame:
            return _ACCEPT
        if not request.host or self._filter.allows(request.host):
            return _ACCEPT

        logger.warning(f"Blocking navigation to non-allowed domain: {request.host}")
        self._report(EnforcementEvent(kind=EnforcementKind.NAVIGATION, target=request.host, detail=request.url))
        return NavigationDecision(
            accepted=False,
            block_page_html=render_block_page(request.url, self._start_url),
        )

    def allow_new_window(self, window_type: str = "") -> bool:
        """Popups and secondary windows are never created."""
        logger.warning("Popup window blocked")
        self._report(EnforcementEvent(kind=EnforcementKind.POPUP, target=window_type or "window"))
        return False

    def allow_print(self) -> bool:
        """Printing from the page is never allowed."""
        logger.warning("Print request blocked")
        self._report(EnforcementEvent(kind=EnforcementKind.PRINT, target="page"))
        return False

    def _report(self, event: EnforcementEvent) -> None:
        try:
            self._reporter.report(event)
        except Exception:
            logger.exception("Enforcement reporter failed")
