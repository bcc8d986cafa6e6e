"""Domain layer - lockdown models, errors and collaborator interfaces."""

from seb_kiosk.domain.errors import ConfigError, PolicyValidationError
from seb_kiosk.domain.models import (
    EnforcementEvent,
    EnforcementKind,
    KeyChord,
    LockdownSession,
    Policy,
)
from seb_kiosk.domain.ports import InhibitService

__all__ = [
    "ConfigError",
    "EnforcementEvent",
    "EnforcementKind",
    "InhibitService",
    "KeyChord",
    "LockdownSession",
    "Policy",
    "PolicyValidationError",
]
