"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Computes the stress-strain curve once for the session (Model).
2. Instantiates the PlaybackController that owns the transport state.
3. Instantiates the Main Window (View) and passes the controller into it.
4. Prevents circular import errors by being the orchestrator.
"""
import logging
import sys
from typing import Optional

from PySide6.QtWidgets import QApplication

from yieldpoint.config import CURVE_RESOLUTION
from yieldpoint.controller.playback import PlaybackController
from yieldpoint.model.curve import cached_curve
from yieldpoint.view.main_window import MainWindow, VISIBLE_APP_NAME

logger = logging.getLogger(__name__)


def main(resolution: int = CURVE_RESOLUTION, argv: Optional[list[str]] = None) -> int:
    # 1. Create the Qt Application
    app = QApplication(argv if argv is not None else sys.argv)
    app.setApplicationName(VISIBLE_APP_NAME)

    # 2. Initialize the Data Model
    curve = cached_curve(resolution)

    # 3. Initialize the transport and the Main Window
    controller = PlaybackController(curve)
    window = MainWindow(controller)
    window.show()

    logger.info("Simulator window opened.")

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
