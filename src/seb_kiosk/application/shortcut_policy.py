"""Decision table for keyboard shortcuts the kiosk swallows.

The same table feeds the input-filter layer and the direct key handler, so
either layer alone still suppresses every listed chord.
"""

from dataclasses import dataclass

from seb_kiosk.domain.models.key_chord import KeyChord


@dataclass(frozen=True)
class ShortcutRule:
    """A suppressed chord. Extra modifiers beyond the required ones still match."""

    label: str
    key: str
    ctrl: bool = False
    shift: bool = False
    restricted_only: bool = True

    def matches(self, chord: KeyChord) -> bool:
        if chord.key != self.key:
            return False
        if self.ctrl and not chord.ctrl:
            return False
        if self.shift and not chord.shift:
            return False
        return True


SUPPRESSED_SHORTCUTS: tuple[ShortcutRule, ...] = (
    ShortcutRule("Ctrl+P", "P", ctrl=True, restricted_only=False),  # print
    ShortcutRule("Ctrl+S", "S", ctrl=True, restricted_only=False),  # save
    ShortcutRule("Ctrl+L", "L", ctrl=True),  # address bar
    ShortcutRule("Ctrl+T", "T", ctrl=True),  # new tab
    ShortcutRule("Ctrl+N", "N", ctrl=True),  # new window
    ShortcutRule("Ctrl+W", "W", ctrl=True),  # close tab
    ShortcutRule("Ctrl+Shift+I", "I", ctrl=True, shift=True),  # devtools
    ShortcutRule("F11", "F11"),  # fullscreen toggle
)

RESTRICTED_SESSION_TYPE = "x11"


def is_restricted_session(session_type: str | None) -> bool:
    """Legacy X11 sessions get the full shortcut suppression set."""
    return (session_type or "").lower() == RESTRICTED_SESSION_TYPE


class ShortcutPolicy:
    """Answers whether a chord must be swallowed in this session."""

    def __init__(
        self,
        restricted_environment: bool,
        rules: tuple[ShortcutRule, ...] = SUPPRESSED_SHORTCUTS,
    ) -> None:
        self._restricted = restricted_environment
        self._rules = rules

    @property
    def restricted_environment(self) -> bool:
        return self._restricted

    def match(self, chord: KeyChord) -> ShortcutRule | None:
        """Return the rule suppressing ``chord``, or None if it may pass."""
        for rule in self._rules:
            if rule.restricted_only and not self._restricted:
                continue
            if rule.matches(chord):
                return rule
        return None

    def should_suppress(self, chord: KeyChord) -> bool:
        return self.match(chord) is not None
