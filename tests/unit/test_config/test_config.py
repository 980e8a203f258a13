"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from webterm.config import AppConfig, load_config


def test_defaults(tmp_path) -> None:
    config = load_config(cwd=tmp_path, environ={})
    assert config == AppConfig()
    assert config.plugin_package == "webterm.plugins"
    assert config.log_level == "WARNING"
    assert config.timestamp_format == "%m/%d/%Y %H:%M:%S"
    assert config.kv_database_path is None


def test_toml_nested_tables_are_flattened(tmp_path) -> None:
    (tmp_path / "config.toml").write_text(
        'show_banner = false\n[log]\nlevel = "debug"\nfile_path = "logs/app.log"\n',
        encoding="utf-8",
    )
    config = load_config(cwd=tmp_path, environ={})
    assert config.show_banner is False
    assert config.log_level == "DEBUG"
    assert config.log_file_path == Path("logs/app.log").resolve()


def test_precedence_env_over_dotenv_over_toml(tmp_path) -> None:
    (tmp_path / "config.toml").write_text('log_level = "ERROR"\nenable_color = true\n', encoding="utf-8")
    (tmp_path / ".env").write_text(
        "# comment\nLOG_LEVEL=INFO\nWEBTERM_ENABLE_COLOR='no'\n", encoding="utf-8")

    config = load_config(cwd=tmp_path, environ={})
    assert config.log_level == "INFO"
    assert config.enable_color is False

    config = load_config(cwd=tmp_path, environ={"WEBTERM_LOG_LEVEL": "critical", "LOG_LEVEL": "DEBUG"})
    assert config.log_level == "CRITICAL"


def test_unknown_keys_are_kept(tmp_path) -> None:
    config = load_config(cwd=tmp_path, environ={"WEBTERM_THEME": "dark"})
    assert config.extra == {"THEME": "dark"}


@pytest.mark.parametrize(
    "environ, key",
    [
        ({"WEBTERM_LOG_LEVEL": "loud"}, "LOG_LEVEL"),
        ({"WEBTERM_SHOW_BANNER": "maybe"}, "SHOW_BANNER"),
        ({"WEBTERM_PLUGIN_PACKAGE": "not a module"}, "PLUGIN_PACKAGE"),
        ({"WEBTERM_TIMESTAMP_FORMAT": ""}, "TIMESTAMP_FORMAT"),
    ],
)
def test_invalid_values_name_the_key(tmp_path, environ, key) -> None:
    with pytest.raises(ValueError, match=key):
        load_config(cwd=tmp_path, environ=environ)


def test_invalid_toml_is_reported(tmp_path) -> None:
    (tmp_path / "config.toml").write_text("this is = = not toml", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid TOML"):
        load_config(cwd=tmp_path, environ={})
