"""Translate Qt key events into toolkit-neutral key chords."""

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeyEvent

from seb_kiosk.domain.models.key_chord import KeyChord

_NAMED_KEYS: dict[int, str] = {
    Qt.Key.Key_Escape.value: "Escape",
    Qt.Key.Key_Tab.value: "Tab",
    Qt.Key.Key_Return.value: "Return",
    Qt.Key.Key_Enter.value: "Enter",
    Qt.Key.Key_Backspace.value: "Backspace",
    Qt.Key.Key_Delete.value: "Delete",
}


def key_name(key: int) -> str:
    """Name a Qt key code the way :class:`KeyChord` expects."""
    if Qt.Key.Key_A.value <= key <= Qt.Key.Key_Z.value:
        return chr(key)
    if Qt.Key.Key_0.value <= key <= Qt.Key.Key_9.value:
        return chr(key)
    if Qt.Key.Key_F1.value <= key <= Qt.Key.Key_F35.value:
        return f"F{key - Qt.Key.Key_F1.value + 1}"
    return _NAMED_KEYS.get(key, f"0x{key:x}")


def chord_from_parts(key: int, modifiers: Qt.KeyboardModifier) -> KeyChord:
    return KeyChord(
        key=key_name(key),
        ctrl=bool(modifiers & Qt.KeyboardModifier.ControlModifier),
        shift=bool(modifiers & Qt.KeyboardModifier.ShiftModifier),
        alt=bool(modifiers & Qt.KeyboardModifier.AltModifier),
    )


def chord_from_event(event: QKeyEvent) -> KeyChord:
    return chord_from_parts(event.key(), event.modifiers())
