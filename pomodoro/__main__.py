"""Allow running Pomodoro as a module: python -m pomodoro."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .log import configure_logging
from .app import PomodoroApp
from .timer.engine import TimerEngine


def main() -> None:
    logger = configure_logging()

    app = QApplication(sys.argv)
    app.setApplicationName("Pomodoro")
    app.setOrganizationName("Pomodoro")

    engine = TimerEngine()
    window = PomodoroApp(engine)
    window.show()
    logger.info("Pomodoro ready")

    code = app.exec()
    logging.shutdown()
    sys.exit(code)


if __name__ == "__main__":
    main()
