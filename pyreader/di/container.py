from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from pyreader.domain.interfaces import IDocumentLoader, ISettingsStore
from pyreader.services.config.ini_config_service import IniConfigService
from pyreader.services.file_service import DocumentLoader
from pyreader.services.reader_state import ReaderState
from pyreader.services.settings_service import SettingsService
from pyreader.services.ui.adapters import QtFileDialogService
from pyreader.services.ui.main_window import MainWindow
from pyreader.services.ui.ports.dialogs import IFileDialogService
from pyreader.services.ui.presenters import ReaderPresenter
from pyreader.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Builds the ReaderState from the settings store and config
      - Builds the window and attaches its presenter
    """

    def __init__(
        self,
        loader: IDocumentLoader | None = None,
        settings: ISettingsStore | None = None,
        qsettings: QSettings | None = None,
        config: IniConfigService | None = None,
        dialogs: IFileDialogService | None = None,
    ) -> None:
        self.config: IniConfigService = config or IniConfigService()
        self.loader: IDocumentLoader = loader or DocumentLoader()
        self.settings_service: ISettingsStore = settings or SettingsService(
            qsettings or QSettings()
        )
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.state = ReaderState(
            self.settings_service, font_size=self.config.default_font_size()
        )

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: IniConfigService | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(qsettings=qsettings, config=config)

    # ---------- UI factories ----------

    def build_presenter(self, view) -> ReaderPresenter:
        return ReaderPresenter(
            view=view,
            state=self.state,
            loader=self.loader,
            dialogs=self.dialogs,
        )

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> MainWindow:
        """Create the Qt MainWindow, attach its presenter, and open `start_path` if given."""
        window = MainWindow(self.state, app_title=app_title)
        presenter = self.build_presenter(window)
        window.attach_presenter(presenter)
        if start_path:
            presenter.open_path(start_path)
        return window
