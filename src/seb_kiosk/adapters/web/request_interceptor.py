"""QtWebEngine request interceptor delegating to the request gate."""

from PyQt6.QtCore import QObject
from PyQt6.QtWebEngineCore import QWebEngineUrlRequestInfo, QWebEngineUrlRequestInterceptor

from seb_kiosk.application.request_gate import RequestGate


class QtInterceptedRequest:
    """Adapts ``QWebEngineUrlRequestInfo`` to the intercepted-request protocol."""

    def __init__(self, info: QWebEngineUrlRequestInfo) -> None:
        self._info = info

    @property
    def url(self) -> str:
        return self._info.requestUrl().toString()

    @property
    def host(self) -> str:
        return self._info.requestUrl().host()

    def block(self) -> None:
        self._info.block(True)

    def set_header(self, name: str, value: str) -> None:
        self._info.setHttpHeader(name.encode("utf-8"), value.encode("utf-8"))


class KioskRequestInterceptor(QWebEngineUrlRequestInterceptor):
    """Runs every outbound request of the profile through the request gate."""

    def __init__(self, gate: RequestGate, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._gate = gate

    def interceptRequest(self, info: QWebEngineUrlRequestInfo) -> None:  # noqa: N802
        self._gate.intercept(QtInterceptedRequest(info))
