"""Enforcement event domain model."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class EnforcementKind(StrEnum):
    """Category of a blocked action."""

    REQUEST = "request"
    NAVIGATION = "navigation"
    POPUP = "popup"
    PRINT = "print"
    SHORTCUT = "shortcut"
    DOWNLOAD = "download"


class EnforcementEvent(BaseModel):
    """Something the lockdown refused to let happen. Never fatal."""

    model_config = ConfigDict(frozen=True)

    kind: EnforcementKind
    target: str
    detail: str = ""
