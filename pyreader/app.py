from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from pyreader.di.container import Container
from pyreader.services.config.ini_config_service import IniConfigService
from pyreader.utils.constants import APP_NAME, APP_ORG
from pyreader.utils.log import configure_logging

logger = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps logging and Qt, composes the application via the DI container,
    and launches the main window.
    """
    config = IniConfigService(project_root=Path(__file__).resolve().parents[1])
    configure_logging(config.log_level())
    if config.loaded_from:
        logger.info("Config loaded from %s", config.loaded_from)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional file path to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    return app.exec()
