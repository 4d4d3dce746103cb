from __future__ import annotations

from PyQt6.QtWidgets import QApplication


THEME_QSS = """
QWidget {
    background: #202225;
    color: #dcddde;
    font-size: 13px;
}

QPushButton#TimerButton {
    background: transparent;
    border: none;
    padding: 4px 8px;
}

QPushButton#TimerButton:hover {
    background: #2c2f33;
    border-radius: 8px;
}

QPushButton#TimerButton:pressed {
    background: #36393f;
    border-radius: 8px;
}

QLabel#TimerLabel {
    background: transparent;
}

QLabel#BreaksLabel {
    background: transparent;
    font-size: 20px;
    color: #b9bbbe;
}
"""


def apply_theme(app: QApplication) -> None:
    app.setStyleSheet(THEME_QSS)
