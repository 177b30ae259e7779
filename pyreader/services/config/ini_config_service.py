# pyreader/services/config/ini_config_service.py
from __future__ import annotations

import configparser
import logging
from collections.abc import Mapping
from pathlib import Path

from platformdirs import user_config_dir

from pyreader.domain.interfaces import IConfigService
from pyreader.utils.constants import FONT_SIZE_DEFAULT

logger = logging.getLogger(__name__)


class IniConfigService(IConfigService):
    r"""
    INI-backed configuration reader.

    Load order (first hit wins):
      1. Explicit path provided at construction
      2. User config dir (e.g., ~/.config/PyTextReader/config.ini or %APPDATA%\PyTextReader\config.ini)
      3. Project default at <repo>/config/config.ini  (optional)

    Recognised keys:
      [reader] font_size = 18
      [log]    level     = WARNING
    """

    DEFAULT_APP_DIR = "PyTextReader"
    DEFAULT_FILE = "config.ini"

    def __init__(self, explicit_path: Path | None = None, project_root: Path | None = None):
        self._parser = configparser.ConfigParser()
        self._loaded_from: Path | None = None

        candidates: list[Path] = []
        if explicit_path:
            candidates.append(explicit_path)
        candidates.append(Path(user_config_dir(self.DEFAULT_APP_DIR)) / self.DEFAULT_FILE)
        if project_root:
            candidates.append(project_root / "config" / self.DEFAULT_FILE)

        for path in candidates:
            try:
                if path.exists():
                    with path.open("r", encoding="utf-8") as fh:
                        self._parser.read_file(fh)
                    self._loaded_from = path
                    break
            except (OSError, configparser.Error) as e:
                # Malformed config must not stop the reader; defaults apply.
                logger.warning("Ignoring config file %s: %s", path, e)
                self._parser = configparser.ConfigParser()
                continue

        if "app" not in self._parser:
            self._parser["app"] = {}
        self._parser["app"].setdefault("version", "0.0.0")

    # ----- IConfigService -----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        if section not in self._parser:
            return default
        return self._parser[section].get(key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return int(val.strip())
        except ValueError:
            return default

    def get_float(self, section: str, key: str, default: float | None = None) -> float | None:
        val = self.get(section, key, None)
        if val is None:
            return default
        try:
            return float(val.strip())
        except ValueError:
            return default

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        val = self.get(section, key, None)
        if val is None:
            return default
        truth = {"1", "true", "yes", "y", "on"}
        falsy = {"0", "false", "no", "n", "off"}
        s = val.strip().lower()
        if s in truth:
            return True
        if s in falsy:
            return False
        return default

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return {sect: dict(self._parser[sect]) for sect in self._parser.sections()}

    def app_version(self) -> str:
        return self.get("app", "version", "0.0.0") or "0.0.0"

    # ----- Reader settings -----

    def default_font_size(self) -> float:
        return self.get_float("reader", "font_size", FONT_SIZE_DEFAULT) or FONT_SIZE_DEFAULT

    def log_level(self) -> str:
        return (self.get("log", "level", "WARNING") or "WARNING").strip().upper()

    @property
    def loaded_from(self) -> Path | None:
        """For diagnostics."""
        return self._loaded_from
