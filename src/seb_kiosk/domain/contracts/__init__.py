"""Protocols for collaborators the lockdown core calls into."""

from seb_kiosk.domain.contracts.enforcement_reporter import EnforcementReporterProtocol
from seb_kiosk.domain.contracts.intercepted_request import InterceptedRequestProtocol
from seb_kiosk.domain.contracts.keep_alive import (
    KeepAliveActionProtocol,
    KeepAliveTimerProtocol,
)
from seb_kiosk.domain.contracts.password_prompt import PasswordPromptProtocol
from seb_kiosk.domain.contracts.request_hash_provider import RequestHashProviderProtocol

__all__ = [
    "EnforcementReporterProtocol",
    "InterceptedRequestProtocol",
    "KeepAliveActionProtocol",
    "KeepAliveTimerProtocol",
    "PasswordPromptProtocol",
    "RequestHashProviderProtocol",
]
