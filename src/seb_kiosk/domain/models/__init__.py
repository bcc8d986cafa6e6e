"""Domain models for the kiosk lockdown."""

from seb_kiosk.domain.models.config_load_result import ConfigLoadResult
from seb_kiosk.domain.models.enforcement_event import EnforcementEvent, EnforcementKind
from seb_kiosk.domain.models.key_chord import KeyChord
from seb_kiosk.domain.models.kiosk_state import KeyDisposition, KioskState, QuitGesture
from seb_kiosk.domain.models.lockdown_session import LockdownSession
from seb_kiosk.domain.models.navigation import NavigationDecision, NavigationRequest
from seb_kiosk.domain.models.policy import (
    DEFAULT_CLIENT_TYPE,
    DEFAULT_CLIENT_VERSION,
    Policy,
)

__all__ = [
    "DEFAULT_CLIENT_TYPE",
    "DEFAULT_CLIENT_VERSION",
    "ConfigLoadResult",
    "EnforcementEvent",
    "EnforcementKind",
    "KeyChord",
    "KeyDisposition",
    "KioskState",
    "LockdownSession",
    "NavigationDecision",
    "NavigationRequest",
    "Policy",
    "QuitGesture",
]
