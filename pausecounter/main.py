from __future__ import annotations

"""Entry point of the Pause Counter widget.

Sets up logging, reads the config (exiting on a broken one), wires the
stopwatch to its session store and starts the Qt event loop.
"""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from pausecounter.core.config import ConfigError, load_config
from pausecounter.core.timer import StopwatchTimer
from pausecounter.data.session_log import build_session_store
from pausecounter.ui.main_window import MainWindow
from pausecounter.ui.styles import apply_theme


logger = logging.getLogger(__name__)


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def main() -> int:
    """Create the app's dependencies and run the UI loop."""
    setup_logging()

    try:
        config = load_config()
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1

    app = QApplication(sys.argv)
    app.setApplicationName("Pause Counter")
    apply_theme(app)

    timer = StopwatchTimer(
        thresholds=config.thresholds(),
        store=build_session_store(config),
        start_unpaused=config.start_unpaused,
    )
    window = MainWindow(timer=timer, config=config)

    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
