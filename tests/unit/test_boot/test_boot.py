"""Tests for the boot sequence and entry point."""

from __future__ import annotations

import pytest

from webterm.boot import boot_sequence
from webterm.commands import DispatchOutcome
from webterm.config import AppConfig


@pytest.fixture
def config(tmp_path, monkeypatch) -> AppConfig:
    monkeypatch.chdir(tmp_path)
    return AppConfig(enable_color=False)


def test_boot_wires_bundled_plugins(config, display, capsys) -> None:
    state = boot_sequence(config, display=display)

    out = capsys.readouterr().out
    assert "[  OK  ] Initialize logger" in out
    assert "[  OK  ] Boot complete" in out
    assert state.failed_plugins == []
    assert state.registry.names() == ["clear", "kv", "echo"]
    assert state.registry.frozen

    terminal = state.terminal
    assert terminal.submit("kv set a 1") is DispatchOutcome.HANDLED
    assert terminal.submit("echo hi") is DispatchOutcome.HANDLED
    assert terminal.submit("bogus") is DispatchOutcome.UNKNOWN
    assert display.lines[-2:] == [
        "hi", "Unknown command: bogus. Type 'help' for available commands."]
    assert terminal.recall_previous() == "bogus"


def test_boot_reports_failed_plugin_initialization(config, display, capsys, monkeypatch) -> None:
    from webterm.plugins.kvstore import KvStoreCommand

    def _explode(self) -> None:
        raise OSError("no disk")

    monkeypatch.setattr(KvStoreCommand, "initialize", _explode)

    state = boot_sequence(config, display=display)

    assert state.failed_plugins == ["kv"]
    assert "[ WARN ] Plugin 'kv' failed to initialize" in capsys.readouterr().out
    assert state.terminal.submit("kv list") is DispatchOutcome.FAILED
    assert state.terminal.submit("echo still here") is DispatchOutcome.HANDLED
    assert display.lines[-1] == "still here"


def test_boot_fails_loudly_on_missing_plugin_package(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ModuleNotFoundError):
        boot_sequence(AppConfig(plugin_package="no_such_pkg_xyz", enable_color=False))
    assert "[FAILED] Load plugins" in capsys.readouterr().out


def test_main_runs_until_eof(tmp_path, monkeypatch, capsys) -> None:
    from webterm import __main__ as entry
    from webterm.interface import PlainCLI

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("WEBTERM_ENABLE_COLOR", "false")
    monkeypatch.setattr(entry, "make_cli", PlainCLI)
    lines = iter(["echo from main"])

    def _input(prompt: str) -> str:
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", _input)

    assert entry.main() == 0
    out = capsys.readouterr().out
    assert "webterm ready." in out
    assert "from main" in out


def test_boot_hands_kv_database_path_to_plugin(tmp_path, monkeypatch, display) -> None:
    monkeypatch.chdir(tmp_path)
    db_path = tmp_path / "store" / "kv.db"
    cfg = AppConfig(kv_database_path=db_path, enable_color=False)

    state = boot_sequence(cfg, display=display)

    assert state.terminal.submit("kv set a 1") is DispatchOutcome.HANDLED
    assert db_path.exists()
    assert state.registry.get("kv").get("a") == "1"


def test_booting_twice_keeps_plugin_state_separate(tmp_path, monkeypatch, display) -> None:
    monkeypatch.chdir(tmp_path)
    cfg = AppConfig(kv_database_path=tmp_path / "kv.db", enable_color=False)

    first = boot_sequence(cfg, display=display)
    first.terminal.submit("kv set a 1")
    second = boot_sequence(cfg, display=display)

    first_kv = first.registry.get("kv")
    second_kv = second.registry.get("kv")
    assert first_kv is not second_kv
    # the first boot's connection survives the second boot
    assert first_kv.get("a") == "1"
    assert second_kv.get("a") == "1"
    assert first.terminal.submit("kv set b 2") is DispatchOutcome.HANDLED
    assert second.terminal.submit("kv get b") is DispatchOutcome.HANDLED
    assert display.lines[-1] == "2"
