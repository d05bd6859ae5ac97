"""Login gate: shared-secret prompt. A wrong password is reported inline."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QLineEdit, QVBoxLayout, QWidget

from paskanet.config import OS_NAME
from paskanet.core.errors import CredentialRejected
from paskanet.ui.components.buttons import PrimaryButton

if TYPE_CHECKING:
    from paskanet.application.container import Container


class LoginScreen(QWidget):
    def __init__(self, container: Container, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._container = container
        self.setObjectName("loginScreen")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        box = QFrame()
        box.setObjectName("loginBox")
        box.setFixedWidth(320)
        form = QVBoxLayout(box)
        title = QLabel(OS_NAME)
        title.setStyleSheet("font-size: 24px; font-weight: 600;")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        form.addWidget(title)
        hint = QLabel("Enter password to continue.")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        form.addWidget(hint)

        self._password = QLineEdit()
        self._password.setPlaceholderText("Password")
        self._password.setEchoMode(QLineEdit.EchoMode.Password)
        self._password.returnPressed.connect(self._submit)
        form.addWidget(self._password)

        self._login_btn = PrimaryButton("Login")
        self._login_btn.clicked.connect(self._submit)
        form.addWidget(self._login_btn)

        self._error = QLabel("")
        self._error.setObjectName("loginError")
        self._error.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._error.setVisible(False)
        form.addWidget(self._error)

        root = QVBoxLayout(self)
        root.addStretch(1)
        root.addWidget(box, 0, Qt.AlignmentFlag.AlignCenter)
        root.addStretch(1)
        self._password.setFocus()

    def error_text(self) -> str:
        return "" if self._error.isHidden() else self._error.text()

    def _submit(self) -> None:
        password = self._password.text()
        self._password.clear()
        try:
            self._container.session.login(password)
        except CredentialRejected as exc:
            self._error.setText(exc.message)
            self._error.setVisible(True)
            self._password.setFocus()
