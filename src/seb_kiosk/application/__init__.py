"""Application layer - the lockdown policy core.

Nothing here depends on the GUI toolkit; adapters feed events in and carry
decisions out.
"""

from seb_kiosk.application.domain_matcher import HostFilter, is_allowed
from seb_kiosk.application.idle_inhibitor import IdleInhibitor
from seb_kiosk.application.integrity import LoggingKeepAlive, PlaceholderRequestHashProvider
from seb_kiosk.application.kiosk_state_machine import KioskStateMachine
from seb_kiosk.application.navigation_gate import PAGE_HARDENING_SCRIPT, NavigationGate
from seb_kiosk.application.request_gate import RequestGate
from seb_kiosk.application.shortcut_policy import ShortcutPolicy, is_restricted_session

__all__ = [
    "PAGE_HARDENING_SCRIPT",
    "HostFilter",
    "IdleInhibitor",
    "KioskStateMachine",
    "LoggingKeepAlive",
    "NavigationGate",
    "PlaceholderRequestHashProvider",
    "RequestGate",
    "ShortcutPolicy",
    "is_allowed",
    "is_restricted_session",
]
