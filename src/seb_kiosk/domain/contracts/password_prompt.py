"""Protocol for the modal quit-password dialogs."""

from typing import Protocol


class PasswordPromptProtocol(Protocol):
    """Modal dialogs used by the quit flow. Both calls block until dismissed."""

    def ask_password(self) -> str | None:
        """Ask the user for the quit password.

        Returns:
            The entered text, or None if the prompt was cancelled.
        """
        ...

    def show_rejection(self) -> None:
        """Tell the user the password was wrong and the kiosk stays open."""
        ...
