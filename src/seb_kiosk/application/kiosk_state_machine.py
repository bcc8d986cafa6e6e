"""Exit flow and keyboard lockdown for the kiosk window.

States::

    RUNNING --quit gesture, password pending--> AWAITING_QUIT_PASSWORD
    AWAITING_QUIT_PASSWORD --wrong / cancelled--> RUNNING
    AWAITING_QUIT_PASSWORD --correct--> CLOSING
    RUNNING --quit gesture, no password pending--> CLOSING

The password prompt is the one blocking step: :meth:`request_close` does not
return until the prompt collaborator resolves. Gestures that arrive while a
prompt is open are ignored.
"""

import logging

from seb_kiosk.application.shortcut_policy import ShortcutPolicy
from seb_kiosk.domain.contracts.enforcement_reporter import EnforcementReporterProtocol
from seb_kiosk.domain.contracts.password_prompt import PasswordPromptProtocol
from seb_kiosk.domain.models.enforcement_event import EnforcementEvent, EnforcementKind
from seb_kiosk.domain.models.key_chord import KeyChord
from seb_kiosk.domain.models.kiosk_state import KeyDisposition, KioskState, QuitGesture
from seb_kiosk.domain.models.lockdown_session import LockdownSession

logger = logging.getLogger(__name__)


def quit_gesture_for(chord: KeyChord) -> QuitGesture | None:
    """Map a key press to a quit gesture (Escape or Ctrl+Q)."""
    if chord.key == "Escape":
        return QuitGesture.ESCAPE
    if chord.key == "Q" and chord.ctrl:
        return QuitGesture.CTRL_Q
    return None


class KioskStateMachine:
    """Reconciles shortcut suppression with the password-gated close."""

    def __init__(
        self,
        session: LockdownSession,
        prompt: PasswordPromptProtocol,
        reporter: EnforcementReporterProtocol,
        shortcuts: ShortcutPolicy | None = None,
    ) -> None:
        self._session = session
        self._prompt = prompt
        self._reporter = reporter
        self._shortcuts = shortcuts or ShortcutPolicy(session.is_restricted_shortcut_environment)
        self._state = KioskState.RUNNING

        if session.quit_password:
            logger.info("Quit password protection enabled")
        if self._shortcuts.restricted_environment:
            logger.info("X11 session detected - enabling shortcut suppression")

    @property
    def state(self) -> KioskState:
        return self._state

    @property
    def session(self) -> LockdownSession:
        return self._session

    def request_close(self, gesture: QuitGesture) -> bool:
        """Handle a quit gesture.

        Returns:
            True if the kiosk may close now, False if it stays open.
        """
        if self._state is KioskState.CLOSING:
            return True
        if self._state is KioskState.AWAITING_QUIT_PASSWORD:
            logger.debug(f"Ignoring {gesture} while the quit password prompt is open")
            return False

        if not self._session.requires_password:
            self._state = KioskState.CLOSING
            logger.info(f"Closing kiosk ({gesture})")
            return True

        self._state = KioskState.AWAITING_QUIT_PASSWORD
        try:
            entered = self._prompt.ask_password()
        except Exception:
            logger.exception("Quit password prompt failed")
            self._state = KioskState.RUNNING
            return False
        if entered is None:
            logger.info("Quit password prompt cancelled")
            self._state = KioskState.RUNNING
            return False
        if entered != self._session.quit_password:
            logger.warning("Incorrect quit password entered")
            self._state = KioskState.RUNNING
            self._prompt.show_rejection()
            return False

        self._session.mark_password_verified()
        self._state = KioskState.CLOSING
        logger.info(f"Quit password accepted, closing kiosk ({gesture})")
        return True

    def filter_input(self, chord: KeyChord) -> bool:
        """Input-filter layer. Returns True if the event is consumed."""
        return self._suppress(chord)

    def handle_key_press(self, chord: KeyChord) -> KeyDisposition:
        """Direct key-handler layer: quit gestures first, then shortcuts."""
        gesture = quit_gesture_for(chord)
        # Keyboard quit gestures are only armed when a quit password is set.
        if gesture is not None and self._session.quit_password:
            return KeyDisposition.CLOSE if self.request_close(gesture) else KeyDisposition.CONSUME
        if self._suppress(chord):
            return KeyDisposition.CONSUME
        return KeyDisposition.FORWARD

    def _suppress(self, chord: KeyChord) -> bool:
        rule = self._shortcuts.match(chord)
        if rule is None:
            return False
        logger.warning(f"Shortcut blocked ({rule.label})")
        try:
            self._reporter.report(EnforcementEvent(kind=EnforcementKind.SHORTCUT, target=rule.label))
        except Exception:
            logger.exception("Enforcement reporter failed")
        return True
