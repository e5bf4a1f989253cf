# tests/test_ini_config_service.py
from __future__ import annotations

from pathlib import Path

import pytest

from mdview.services.config.ini_config_service import IniConfigService

MODULE = "mdview.services.config.ini_config_service"


def write_ini(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


@pytest.fixture()
def no_platformdirs(monkeypatch, tmp_path):
    """No platformdirs, HOME inside tmp, no env override."""
    monkeypatch.setattr(f"{MODULE}.user_config_dir", None, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv(IniConfigService.ENV_VAR, raising=False)
    return tmp_path / ".config" / IniConfigService.DEFAULT_APP_DIR / IniConfigService.DEFAULT_FILE


@pytest.fixture()
def fake_platformdirs(monkeypatch, tmp_path):
    def fake_user_config_dir(appname: str) -> str:
        return str(tmp_path / "usercfg" / appname)

    monkeypatch.setattr(f"{MODULE}.user_config_dir", fake_user_config_dir, raising=False)
    monkeypatch.delenv(IniConfigService.ENV_VAR, raising=False)
    return Path(fake_user_config_dir(IniConfigService.DEFAULT_APP_DIR)) / IniConfigService.DEFAULT_FILE


def test_defaults_when_no_config_files(no_platformdirs):
    cfg = IniConfigService()
    assert cfg.app_version() == "0.0.0"
    assert cfg.loaded_from is None
    assert cfg.get("viewer", "start_raw", "x") == "x"
    assert cfg.get_int("app", "nonint", 42) == 42
    assert cfg.get_bool("viewer", "nope", False) is False


def test_home_fallback_used_when_platformdirs_missing(no_platformdirs):
    write_ini(no_platformdirs, "[app]\nversion = 4.5.6\n")
    cfg = IniConfigService()
    assert cfg.app_version() == "4.5.6"
    assert cfg.loaded_from == no_platformdirs


def test_project_root_config_is_used_when_present(no_platformdirs, tmp_path):
    proj_root = tmp_path / "repo"
    ini = proj_root / "config" / "config.ini"
    write_ini(ini, "[viewer]\nstart_raw = true\n")

    cfg = IniConfigService(project_root=proj_root)
    assert cfg.get_bool("viewer", "start_raw", None) is True
    assert cfg.loaded_from == ini


def test_platformdirs_preferred_over_project_root(fake_platformdirs, tmp_path):
    proj_path = tmp_path / "repo" / "config" / "config.ini"
    write_ini(fake_platformdirs, "[app]\nversion = 2.0.0\n")
    write_ini(proj_path, "[app]\nversion = 1.0.0\n")

    cfg = IniConfigService(project_root=tmp_path / "repo")
    assert cfg.app_version() == "2.0.0"
    assert cfg.loaded_from == fake_platformdirs


def test_env_var_beats_user_config(fake_platformdirs, monkeypatch, tmp_path):
    env_ini = tmp_path / "env.ini"
    write_ini(fake_platformdirs, "[logging]\nlevel = info\n")
    write_ini(env_ini, "[logging]\nlevel = debug\n")
    monkeypatch.setenv(IniConfigService.ENV_VAR, str(env_ini))

    cfg = IniConfigService()
    assert cfg.get("logging", "level") == "debug"
    assert cfg.loaded_from == env_ini


def test_explicit_path_overrides_everything(fake_platformdirs, monkeypatch, tmp_path):
    env_ini = tmp_path / "env.ini"
    explicit = tmp_path / "explicit.ini"
    write_ini(fake_platformdirs, "[app]\nversion = 2.0.0\n")
    write_ini(env_ini, "[app]\nversion = 3.0.0\n")
    write_ini(explicit, "[app]\nversion = 9.9.9\n")
    monkeypatch.setenv(IniConfigService.ENV_VAR, str(env_ini))

    cfg = IniConfigService(explicit_path=explicit, project_root=tmp_path / "repo")
    assert cfg.app_version() == "9.9.9"
    assert cfg.loaded_from == explicit


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("42", 42),
        ("  7  ", 7),
        ("notanint", None),
        ("", None),
    ],
)
def test_get_int_parsing(no_platformdirs, raw, expected):
    write_ini(no_platformdirs, f"[limits]\nmax = {raw}\n")
    cfg = IniConfigService()
    assert cfg.get_int("limits", "max", None) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        (" True ", True),
        ("yes", True),
        ("on", True),
        ("false", False),
        ("no", False),
        ("off", False),
        ("0", False),
        ("maybe", None),
        ("", None),
    ],
)
def test_get_bool_parsing(no_platformdirs, raw, expected):
    write_ini(no_platformdirs, f"[viewer]\nstart_raw = {raw}\n")
    cfg = IniConfigService()
    assert cfg.get_bool("viewer", "start_raw", None) is expected


def test_as_dict_snapshot(no_platformdirs):
    write_ini(no_platformdirs, "[app]\nversion = 3.1.4\n\n[logging]\nlevel = warning\nfile = /tmp/x.log\n")
    snap = IniConfigService().as_dict()
    assert snap.get("app", {}).get("version") == "3.1.4"
    assert snap.get("logging", {}).get("level") == "warning"
    assert snap.get("logging", {}).get("file") == "/tmp/x.log"


def test_malformed_config_is_ignored_and_defaults_used(fake_platformdirs, caplog):
    fake_platformdirs.parent.mkdir(parents=True, exist_ok=True)
    fake_platformdirs.write_text("this is not INI at all", encoding="utf-8")

    cfg = IniConfigService()
    assert cfg.loaded_from is None
    assert cfg.app_version() == "0.0.0"
    assert any("Ignoring unreadable config" in r.getMessage() for r in caplog.records)


def test_malformed_first_candidate_falls_through_to_next(fake_platformdirs, tmp_path):
    write_ini(fake_platformdirs, "garbage without header")
    proj_ini = tmp_path / "repo" / "config" / "config.ini"
    write_ini(proj_ini, "[app]\nversion = 1.1.1\n")

    cfg = IniConfigService(project_root=tmp_path / "repo")
    assert cfg.app_version() == "1.1.1"
    assert cfg.loaded_from == proj_ini
