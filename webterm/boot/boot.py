#!/usr/bin/env python3
# webterm/boot/boot.py
from __future__ import annotations
"""
Boot sequence for webterm.

Each step prints a Linux-style [  OK  ] / [FAILED] status line. Plugin
initialization failures are reported as warnings and never stop the boot.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from webterm.commands import CommandRegistry
from webterm.config import AppConfig, load_config
from webterm.interface import Dispatcher, HistoryNavigator, Terminal, load_plugins
from webterm.ui import ConsoleDisplay, Display, colorize, init_logger, print_line


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger
    registry: CommandRegistry
    terminal: Terminal
    failed_plugins: list[str]


def _step(label: str, fn: Callable[[], Any], *, color: bool = True) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        text = f"[FAILED] {label} ({type(exc).__name__}: {exc})"
        print_line(colorize(text, "red") if color else text)
        raise
    text = f"[  OK  ] {label}"
    print_line(colorize(text, "green") if color else text)
    return out


def boot_sequence(config: AppConfig | None = None, display: Display | None = None) -> BootState:
    cfg = config if config is not None else _step("Load configuration", load_config)
    color = cfg.enable_color

    logger = _step(
        "Initialize logger",
        lambda: init_logger(
            "webterm",
            level=cfg.log_level,
            logfile=str(cfg.log_file_path) if cfg.log_file_path else None,
            color=color,
        ),
        color=color,
    )

    registry = _step(
        f"Load plugins from '{cfg.plugin_package}'",
        lambda: load_plugins(cfg.plugin_package),
        color=color,
    )

    sink = display if display is not None else ConsoleDisplay(
        timestamp_format=cfg.timestamp_format, color=color)
    dispatcher = Dispatcher(registry, sink)

    failed = _step(
        f"Initialize {len(registry)} plugin(s)",
        lambda: dispatcher.initialize_plugins(cfg),
        color=color,
    )
    for name in failed:
        text = f"[ WARN ] Plugin '{name}' failed to initialize"
        print_line(colorize(text, "yellow") if color else text)

    terminal = Terminal(dispatcher, HistoryNavigator(), timestamp_format=cfg.timestamp_format)
    _step("Boot complete", lambda: None, color=color)

    return BootState(
        config=cfg,
        logger=logger,
        registry=registry,
        terminal=terminal,
        failed_plugins=failed,
    )
