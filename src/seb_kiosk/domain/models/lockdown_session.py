"""Lockdown session state owned by the kiosk window."""

from dataclasses import dataclass


@dataclass
class LockdownSession:
    """Per-process lockdown context.

    ``password_verified`` is the only field that changes after creation: it
    latches to True on the first correct quit password and never resets.
    """

    quit_password: str = ""
    is_restricted_shortcut_environment: bool = False
    password_verified: bool = False

    @property
    def requires_password(self) -> bool:
        """True while a quit password is configured and not yet entered."""
        return bool(self.quit_password) and not self.password_verified

    def mark_password_verified(self) -> None:
        self.password_verified = True
