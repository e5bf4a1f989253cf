from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from mdview.domain.interfaces import IAppConfig
from mdview.services.config.ini_config_service import IniConfigService
from mdview.utils.constants import (
    CONFIG_SECTION_LOGGING,
    CONFIG_SECTION_VIEWER,
    DEFAULT_LOG_LEVEL,
)

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)


def _project_root_fallback() -> Path:
    """
    Bundle root under PyInstaller (sys._MEIPASS), otherwise the repository root
    walked up from this file: mdview/services/config/app_config.py.
    """
    meipass = getattr(sys, "_MEIPASS", None)  # type: ignore[attr-defined]
    if meipass:
        return Path(meipass)
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    return m.group(1) if m else None


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Wraps IniConfigService with the viewer's typed settings.

    Version precedence:
      1) <project_root>/version file (e.g. v1.0.5)
      2) [app] version from the ini
      3) "0.0.0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    def log_level(self) -> str:
        level = self.ini.get(CONFIG_SECTION_LOGGING, "level", None)
        return (level or DEFAULT_LOG_LEVEL).strip().upper()

    def log_file(self) -> Path | None:
        raw = (self.ini.get(CONFIG_SECTION_LOGGING, "file", None) or "").strip()
        return Path(raw).expanduser() if raw else None

    def start_raw(self) -> bool:
        return bool(self.ini.get_bool(CONFIG_SECTION_VIEWER, "start_raw", False))

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def get_int(self, section: str, key: str, default: int | None = None) -> int | None:
        return self.ini.get_int(section, key, default)

    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None:
        return self.ini.get_bool(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
