"""Idle inhibition through desktop session services on the D-Bus session bus."""

import logging

from PyQt6.QtCore import QMetaType
from PyQt6.QtDBus import QDBusArgument, QDBusConnection, QDBusInterface, QDBusMessage

from seb_kiosk.domain.ports.inhibit_service import InhibitService

logger = logging.getLogger(__name__)

GNOME_INHIBIT_IDLE_FLAG = 8


def _uint(value: int) -> QDBusArgument:
    return QDBusArgument(value, QMetaType.Type.UInt.value)


def _reply_cookie(message: QDBusMessage) -> int | None:
    """Extract the uint cookie from a method reply, or None on error."""
    if message.type() != QDBusMessage.MessageType.ReplyMessage:
        logger.debug(f"D-Bus call failed: {message.errorName()} {message.errorMessage()}")
        return None
    arguments = message.arguments()
    if not arguments:
        return None
    try:
        return int(arguments[0])
    except (TypeError, ValueError):
        return None


class _SessionBusService(InhibitService):
    service = ""
    path = ""
    interface = ""

    def __init__(self, connection: QDBusConnection | None = None) -> None:
        self._connection = connection

    def _interface(self) -> QDBusInterface | None:
        bus = self._connection or QDBusConnection.sessionBus()
        if not bus.isConnected():
            return None
        iface = QDBusInterface(self.service, self.path, self.interface, bus)
        if not iface.isValid():
            return None
        return iface


class FreedesktopScreenSaverService(_SessionBusService):
    """org.freedesktop.ScreenSaver, implemented by most X11-era desktops."""

    name = "org.freedesktop.ScreenSaver"
    service = "org.freedesktop.ScreenSaver"
    path = "/ScreenSaver"
    interface = "org.freedesktop.ScreenSaver"

    def inhibit(self, application_name: str, reason: str) -> int | None:
        iface = self._interface()
        if iface is None:
            return None
        return _reply_cookie(iface.call("Inhibit", application_name, reason))

    def uninhibit(self, cookie: int) -> None:
        iface = self._interface()
        if iface is None:
            logger.warning(f"{self.name} went away before the inhibition was released")
            return
        iface.call("UnInhibit", _uint(cookie))
        logger.info(f"Uninhibited idle via {self.name}")


class GnomeSessionManagerService(_SessionBusService):
    """org.gnome.SessionManager, for GNOME sessions."""

    name = "org.gnome.SessionManager"
    service = "org.gnome.SessionManager"
    path = "/org/gnome/SessionManager"
    interface = "org.gnome.SessionManager"

    def inhibit(self, application_name: str, reason: str) -> int | None:
        iface = self._interface()
        if iface is None:
            return None
        # Inhibit(app_id, toplevel_xid, reason, flags)
        message = iface.call(
            "Inhibit", application_name, _uint(0), reason, _uint(GNOME_INHIBIT_IDLE_FLAG)
        )
        return _reply_cookie(message)

    def uninhibit(self, cookie: int) -> None:
        iface = self._interface()
        if iface is None:
            logger.warning(f"{self.name} went away before the inhibition was released")
            return
        iface.call("Uninhibit", _uint(cookie))
        logger.info(f"Uninhibited idle via {self.name}")


def default_inhibit_services() -> list[InhibitService]:
    """Platform services in priority order."""
    return [FreedesktopScreenSaverService(), GnomeSessionManagerService()]
