"""Lockdown policy domain model."""

from typing import Any

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

DEFAULT_CLIENT_VERSION = "0.1.0"
DEFAULT_CLIENT_TYPE = "SEB-Linux"
REQUIRED_SCHEME = "https"

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


class Policy(BaseModel):
    """Administrator-defined lockdown policy, immutable once loaded.

    Field aliases follow the camelCase keys of the JSON configuration file.
    Validation is strict so that a present field of the wrong JSON type is
    rejected rather than coerced.
    """

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True, extra="ignore")

    start_url: str = Field(alias="startUrl")
    allowed_domains: tuple[str, ...] = Field(default=(), alias="allowedDomains")
    user_agent_suffix: str = Field(default="", alias="userAgentSuffix")
    client_version: str = Field(default="", alias="clientVersion")
    client_type: str = Field(default="", alias="clientType")
    send_config_key: bool = Field(default=True, alias="sendConfigKey")

    @field_validator("allowed_domains", mode="before")
    @classmethod
    def keep_string_domains(cls, value: Any) -> Any:
        """Drop non-string entries; order of the remaining entries is preserved."""
        if isinstance(value, (list, tuple)):
            return tuple(entry for entry in value if isinstance(entry, str))
        return value

    def start_url_problem(self) -> str | None:
        """Describe why ``start_url`` is unusable, or return None when it is fine."""
        if not self.start_url:
            return "Field 'startUrl' cannot be empty"
        try:
            url = _url_adapter.validate_python(self.start_url)
        except ValidationError:
            return f"Invalid URL format: {self.start_url}"
        if url.scheme != REQUIRED_SCHEME:
            return f"startUrl must use HTTPS scheme, got: {url.scheme}"
        return None

    def is_valid(self) -> bool:
        """A policy is valid when its start URL is a well-formed https URL."""
        return self.start_url_problem() is None

    def get_client_version(self) -> str:
        return self.client_version or DEFAULT_CLIENT_VERSION

    def get_client_type(self) -> str:
        return self.client_type or DEFAULT_CLIENT_TYPE

    def compose_user_agent(self, default_user_agent: str) -> str:
        """Append the configured suffix to the browser's default user agent."""
        if not self.user_agent_suffix:
            return default_user_agent
        return f"{default_user_agent} {self.user_agent_suffix}"
