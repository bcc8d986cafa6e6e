"""Locked-down kiosk browser shell for exam sessions."""

__version__ = "1.0.0"
