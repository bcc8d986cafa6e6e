"""Kiosk window lifecycle states and quit gestures."""

from enum import StrEnum


class KioskState(StrEnum):
    """States of the kiosk window exit flow."""

    RUNNING = "running"
    AWAITING_QUIT_PASSWORD = "awaiting_quit_password"
    CLOSING = "closing"


class QuitGesture(StrEnum):
    """User actions that ask the kiosk to exit."""

    WINDOW_CLOSE = "window_close"
    ESCAPE = "escape"
    CTRL_Q = "ctrl_q"


class KeyDisposition(StrEnum):
    """What the window should do with a key press after the kiosk has seen it."""

    FORWARD = "forward"  # hand to the page / default handling
    CONSUME = "consume"  # swallowed, nothing else sees it
    CLOSE = "close"  # consumed, and the window should close now
