"""PyQt6 / QtWebEngine adapters for the kiosk window."""

from seb_kiosk.adapters.web.kiosk_window import KioskWindow

__all__ = ["KioskWindow"]
