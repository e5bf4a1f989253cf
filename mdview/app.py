from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from mdview.di.container import Container
from mdview.utils.constants import APP_NAME, APP_ORG
from mdview.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Configures logging, bootstraps Qt, composes the application via the DI
    container and launches the viewer window.
    """
    container = Container.default()
    configure_logging(container.config.log_level(), container.config.log_file())
    logger.info(
        "%s %s starting (config: %s)",
        APP_NAME,
        container.config.get_version(),
        container.config.loaded_from or "defaults",
    )

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    return app.exec()
