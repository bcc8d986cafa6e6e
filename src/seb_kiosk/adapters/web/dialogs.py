"""Modal dialogs for the quit-password flow."""

from PyQt6.QtWidgets import QInputDialog, QLineEdit, QMessageBox, QWidget


class QtPasswordPrompt:
    """Password prompt and rejection notice parented to the kiosk window."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self._parent = parent

    def ask_password(self) -> str | None:
        password, ok = QInputDialog.getText(
            self._parent,
            "Quit Password Required",
            "Enter password to quit the application:",
            QLineEdit.EchoMode.Password,
        )
        return password if ok else None

    def show_rejection(self) -> None:
        QMessageBox.warning(
            self._parent,
            "Incorrect Password",
            "The password you entered is incorrect. The application will not close.",
        )
