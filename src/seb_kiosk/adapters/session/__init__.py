"""Desktop session adapters (idle inhibition)."""

from seb_kiosk.adapters.session.dbus_inhibit import (
    FreedesktopScreenSaverService,
    GnomeSessionManagerService,
    default_inhibit_services,
)
from seb_kiosk.adapters.session.keep_alive_timer import QtKeepAliveTimer

__all__ = [
    "FreedesktopScreenSaverService",
    "GnomeSessionManagerService",
    "QtKeepAliveTimer",
    "default_inhibit_services",
]
