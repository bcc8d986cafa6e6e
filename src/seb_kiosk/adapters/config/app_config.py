"""12-factor runtime configuration from environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from seb_kiosk.application.shortcut_policy import RESTRICTED_SESSION_TYPE, is_restricted_session

KNOWN_SESSION_TYPES = ("wayland", RESTRICTED_SESSION_TYPE)


class AppConfig(BaseSettings):
    """Process-level settings. The lockdown policy itself comes from the JSON file."""

    model_config = SettingsConfigDict(
        env_prefix="SEB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Root logging level")
    application_name: str = Field(
        default="seb-linux", description="Application name reported to the desktop session"
    )
    application_version: str = Field(default="1.0.0", description="Application version string")
    profile_name: str = Field(
        default="SEBProfile", description="Name of the dedicated browsing profile"
    )

    # Read from the desktop session, not SEB_-prefixed
    session_type: str = Field(
        default="",
        validation_alias="XDG_SESSION_TYPE",
        description="Desktop session type, e.g. 'x11' or 'wayland'",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def is_restricted_shortcut_environment(self) -> bool:
        """X11 sessions get the full shortcut suppression set."""
        return is_restricted_session(self.session_type)

    def describe_session_type(self) -> str:
        """Human-readable session type for the startup log."""
        if not self.session_type:
            return "Session type: unknown (XDG_SESSION_TYPE not set)"
        session_type = self.session_type.lower()
        if session_type in KNOWN_SESSION_TYPES:
            return f"Session type: {session_type}"
        return f"Session type: {session_type} (unexpected value)"
