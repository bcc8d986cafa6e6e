"""Web page that enforces the navigation gate."""

import logging

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtWebEngineCore import QWebEnginePage, QWebEngineProfile, QWebEngineScript

from seb_kiosk.application.block_page import BLOCK_PAGE_BASE_URL
from seb_kiosk.application.navigation_gate import PAGE_HARDENING_SCRIPT, NavigationGate
from seb_kiosk.domain.models.navigation import NavigationRequest

logger = logging.getLogger(__name__)

HARDENING_SCRIPT_NAME = "seb-page-hardening"


class SecureWebEnginePage(QWebEnginePage):
    """Vetoes disallowed main-frame navigations, popups and printing."""

    def __init__(
        self, profile: QWebEngineProfile, gate: NavigationGate, parent: QObject | None = None
    ) -> None:
        super().__init__(profile, parent)
        self._gate = gate
        self.printRequested.connect(self._on_print_requested)
        self._install_hardening_script()

    def acceptNavigationRequest(  # noqa: N802
        self, url: QUrl, type: QWebEnginePage.NavigationType, isMainFrame: bool  # noqa: A002, N803
    ) -> bool:
        decision = self._gate.check(
            NavigationRequest(url=url.toString(), host=url.host(), is_main_frame=isMainFrame)
        )
        if not decision.accepted:
            if decision.block_page_html is not None:
                self.setHtml(decision.block_page_html, QUrl(BLOCK_PAGE_BASE_URL))
            return False
        return super().acceptNavigationRequest(url, type, isMainFrame)

    def createWindow(self, type: QWebEnginePage.WebWindowType) -> QWebEnginePage | None:  # noqa: A002, N802
        self._gate.allow_new_window(type.name)
        return None

    def _on_print_requested(self) -> None:
        self._gate.allow_print()

    def _install_hardening_script(self) -> None:
        script = QWebEngineScript()
        script.setName(HARDENING_SCRIPT_NAME)
        script.setSourceCode(PAGE_HARDENING_SCRIPT)
        script.setInjectionPoint(QWebEngineScript.InjectionPoint.DocumentReady)
        script.setWorldId(QWebEngineScript.ScriptWorldId.MainWorld)
        script.setRunsOnSubFrames(True)
        self.scripts().insert(script)
