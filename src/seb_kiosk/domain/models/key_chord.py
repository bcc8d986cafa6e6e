"""Toolkit-neutral description of a key press."""

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyChord:
    """A key press with the modifiers held at the time.

    ``key`` is an upper-case key name: letters ("L"), function keys ("F11")
    or named keys ("Escape").
    """

    key: str
    ctrl: bool = False
    shift: bool = False
    alt: bool = False

    def __str__(self) -> str:
        parts = []
        if self.ctrl:
            parts.append("Ctrl")
        if self.shift:
            parts.append("Shift")
        if self.alt:
            parts.append("Alt")
        parts.append(self.key)
        return "+".join(parts)
