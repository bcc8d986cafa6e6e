"""Result of loading a policy file."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .policy import Policy


class ConfigLoadResult(BaseModel):
    """Either a fully valid policy or an error description, never both."""

    model_config = ConfigDict(frozen=True)

    policy: Policy | None = None
    error_message: str | None = None
    error_kind: Literal["config", "policy"] | None = None

    @property
    def success(self) -> bool:
        return self.policy is not None

    @classmethod
    def ok(cls, policy: Policy) -> "ConfigLoadResult":
        return cls(policy=policy)

    @classmethod
    def failed(cls, message: str, kind: Literal["config", "policy"] = "config") -> "ConfigLoadResult":
        return cls(error_message=message, error_kind=kind)
