"""Fullscreen, frameless kiosk window hosting the locked-down web view."""

import logging
from collections.abc import Callable

from PyQt6.QtCore import QCoreApplication, QEvent, QObject, Qt, QUrl
from PyQt6.QtGui import QCloseEvent, QKeyEvent
from PyQt6.QtWebEngineCore import QWebEngineDownloadRequest, QWebEngineProfile, QWebEngineSettings
from PyQt6.QtWebEngineWidgets import QWebEngineView
from PyQt6.QtWidgets import QMainWindow, QWidget

from seb_kiosk.adapters.config.app_config import AppConfig
from seb_kiosk.adapters.enforcement_logger import LoggingEnforcementReporter
from seb_kiosk.adapters.session.dbus_inhibit import default_inhibit_services
from seb_kiosk.adapters.session.keep_alive_timer import QtKeepAliveTimer
from seb_kiosk.adapters.web.dialogs import QtPasswordPrompt
from seb_kiosk.adapters.web.key_mapping import chord_from_event
from seb_kiosk.adapters.web.request_interceptor import KioskRequestInterceptor
from seb_kiosk.adapters.web.secure_page import SecureWebEnginePage
from seb_kiosk.application.idle_inhibitor import IdleInhibitor
from seb_kiosk.application.integrity import LoggingKeepAlive, PlaceholderRequestHashProvider
from seb_kiosk.application.kiosk_state_machine import KioskStateMachine
from seb_kiosk.application.navigation_gate import NavigationGate
from seb_kiosk.application.request_gate import RequestGate
from seb_kiosk.domain.models.enforcement_event import EnforcementEvent, EnforcementKind
from seb_kiosk.domain.models.kiosk_state import KeyDisposition, QuitGesture
from seb_kiosk.domain.models.lockdown_session import LockdownSession
from seb_kiosk.domain.models.policy import Policy

logger = logging.getLogger(__name__)

_DISABLED_ATTRIBUTES = (
    QWebEngineSettings.WebAttribute.JavascriptCanOpenWindows,
    QWebEngineSettings.WebAttribute.JavascriptCanAccessClipboard,
    QWebEngineSettings.WebAttribute.LocalStorageEnabled,
    QWebEngineSettings.WebAttribute.PluginsEnabled,
    QWebEngineSettings.WebAttribute.PdfViewerEnabled,
    QWebEngineSettings.WebAttribute.ScreenCaptureEnabled,
)


def release_on_quit(app: QCoreApplication | None, release: Callable[[], None]) -> bool:
    """Run ``release`` when the event loop quits, whichever way the window went.

    Returns False when there is no application instance to hook into.
    """
    if app is None:
        return False
    app.aboutToQuit.connect(release)
    return True


class KioskWindow(QMainWindow):
    """Main window: wires the lockdown core to QtWebEngine and window events."""

    def __init__(
        self,
        policy: Policy,
        session: LockdownSession,
        config: AppConfig,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._policy = policy
        self._session = session
        self._reporter = LoggingEnforcementReporter()
        self._filtered: set[int] = set()

        self._machine = KioskStateMachine(session, QtPasswordPrompt(self), self._reporter)
        self._idle_inhibitor = IdleInhibitor(
            default_inhibit_services(),
            QtKeepAliveTimer(self),
            LoggingKeepAlive(),
            application_name=config.application_name,
        )

        self.setWindowFlags(Qt.WindowType.Window | Qt.WindowType.FramelessWindowHint)

        self._profile = QWebEngineProfile(config.profile_name, self)
        self._view = self._setup_web_engine()

        self._load_start_url()
        self._idle_inhibitor.start()
        release_on_quit(QCoreApplication.instance(), self._idle_inhibitor.stop)
        self.showFullScreen()

    @property
    def state_machine(self) -> KioskStateMachine:
        return self._machine

    def _setup_web_engine(self) -> QWebEngineView:
        if self._policy.user_agent_suffix:
            user_agent = self._policy.compose_user_agent(self._profile.httpUserAgent())
            self._profile.setHttpUserAgent(user_agent)
            logger.info(f"User-Agent set to: {user_agent}")

        request_gate = RequestGate(self._policy, PlaceholderRequestHashProvider(), self._reporter)
        self._interceptor = KioskRequestInterceptor(request_gate, self)
        self._profile.setUrlRequestInterceptor(self._interceptor)
        self._profile.downloadRequested.connect(self._on_download_requested)

        navigation_gate = NavigationGate(self._policy, self._reporter)
        page = SecureWebEnginePage(self._profile, navigation_gate, self)

        view = QWebEngineView(self)
        view.setPage(page)
        view.setContextMenuPolicy(Qt.ContextMenuPolicy.NoContextMenu)

        settings = view.settings()
        for attribute in _DISABLED_ATTRIBUTES:
            settings.setAttribute(attribute, False)
        settings.setAttribute(QWebEngineSettings.WebAttribute.JavascriptEnabled, True)

        self.setCentralWidget(view)
        self._install_input_filter(view)
        page.loadFinished.connect(self._on_load_finished)
        return view

    def _install_input_filter(self, target: QObject | None) -> None:
        if target is None or id(target) in self._filtered:
            return
        target.installEventFilter(self)
        self._filtered.add(id(target))

    def _on_load_finished(self, ok: bool) -> None:  # noqa: ARG002
        # The render widget that receives key events only exists after a load.
        self._install_input_filter(self._view.focusProxy())

    def _load_start_url(self) -> None:
        if not self._policy.is_valid():
            logger.warning("Invalid policy, cannot load start URL")
            return
        logger.info(f"Loading start URL: {self._policy.start_url}")
        self._view.setUrl(QUrl(self._policy.start_url))

    def _on_download_requested(self, download: QWebEngineDownloadRequest) -> None:
        url = download.url().toString()
        download.cancel()
        self._reporter.report(EnforcementEvent(kind=EnforcementKind.DOWNLOAD, target=url))

    def eventFilter(self, obj: QObject | None, event: QEvent | None) -> bool:  # noqa: N802
        if isinstance(event, QKeyEvent) and event.type() == QEvent.Type.KeyPress:
            if self._machine.filter_input(chord_from_event(event)):
                return True
        return super().eventFilter(obj, event)

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        disposition = self._machine.handle_key_press(chord_from_event(event))
        if disposition is KeyDisposition.CLOSE:
            event.accept()
            self.close()
            return
        if disposition is KeyDisposition.CONSUME:
            event.accept()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event: QCloseEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        if not self._machine.request_close(QuitGesture.WINDOW_CLOSE):
            event.ignore()
            return
        self._idle_inhibitor.stop()
        event.accept()
        super().closeEvent(event)
