from __future__ import annotations

from PyQt6.QtCore import QTimer, Qt
from PyQt6.QtGui import QAction, QFontDatabase, QKeySequence
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from pausecounter.core.assets import load_icon
from pausecounter.core.config import AppConfig
from pausecounter.core.timer import StopwatchTimer, TimerSnapshot


class MainWindow(QWidget):
    def __init__(self, timer: StopwatchTimer, config: AppConfig) -> None:
        super().__init__()
        self.setWindowTitle("Pause Counter")
        self.timer = timer
        self.config = config

        self._apply_window_config()
        self._build_ui()
        self._connect_signals()

        self.refresh_timer = QTimer(self)
        self.refresh_timer.timeout.connect(self.refresh)
        self.refresh_timer.start(self.timer.tick_interval_ms)

        self.refresh()

    def _apply_window_config(self) -> None:
        width, height = self.config.window_size
        x, y = self.config.window_position
        self.resize(int(width), int(height))
        self.move(int(x), int(y))
        if self.config.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

        icon = load_icon()
        if icon is not None:
            self.setWindowIcon(icon)

    def _build_ui(self) -> None:
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(10, 10, 10, 10)
        root_layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.timer_button = QPushButton()
        self.timer_button.setObjectName("TimerButton")
        self.timer_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.timer_button.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        # The label carries the threshold color; the button only takes clicks.
        self.timer_label = QLabel()
        self.timer_label.setObjectName("TimerLabel")
        self.timer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.timer_label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        font.setPointSize(32)
        self.timer_label.setFont(font)

        button_layout = QHBoxLayout(self.timer_button)
        button_layout.setContentsMargins(0, 0, 0, 0)
        button_layout.addWidget(self.timer_label)

        self.breaks_label = QLabel()
        self.breaks_label.setObjectName("BreaksLabel")
        self.breaks_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        root_layout.addWidget(self.timer_button, 1)
        root_layout.addWidget(self.breaks_label)

        space_action = QAction(self)
        space_action.setShortcut(QKeySequence(Qt.Key.Key_Space))
        space_action.triggered.connect(self.toggle)
        self.addAction(space_action)

    def _connect_signals(self) -> None:
        self.timer_button.clicked.connect(self.toggle)

    def toggle(self) -> None:
        self.timer.toggle()
        self.refresh_timer.setInterval(self.timer.tick_interval_ms)
        self.refresh()

    def refresh(self) -> None:
        self.render_snapshot(self.timer.tick())

    def render_snapshot(self, snapshot: TimerSnapshot) -> None:
        self.timer_label.setText(snapshot.display_text)
        if snapshot.paused:
            self.timer_label.setStyleSheet("")
            self.breaks_label.setText(f"breaks: {snapshot.pause_count}")
            self.breaks_label.show()
        else:
            self.timer_label.setStyleSheet(f"color: {snapshot.color.value};")
            self.breaks_label.hide()
