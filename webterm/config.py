#!/usr/bin/env python3
# webterm/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in CWD: config.toml, then .env (KEY=... or WEBTERM_KEY=...)
  3) Environment variables prefixed with WEBTERM_ (e.g. WEBTERM_LOG_LEVEL)

Validation:
  - PLUGIN_PACKAGE: dotted module path
  - LOG_LEVEL: one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - LOG_FILE_PATH / KV_DATABASE_PATH: None or normalized path
  - TIMESTAMP_FORMAT: non-empty strftime pattern
  - SHOW_BANNER / ENABLE_COLOR: bool
"""

import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

ENV_PREFIX = "WEBTERM_"

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "PLUGIN_PACKAGE": "webterm.plugins",
    "LOG_LEVEL": "WARNING",
    "LOG_FILE_PATH": None,
    "TIMESTAMP_FORMAT": "%m/%d/%Y %H:%M:%S",
    "KV_DATABASE_PATH": None,       # None -> in-memory store
    "SHOW_BANNER": True,
    "ENABLE_COLOR": True,
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_MODULE_PATH_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*")


# ---------- data model ----------

@dataclass(frozen=True)
class AppConfig:
    plugin_package: str = DEFAULTS["PLUGIN_PACKAGE"]
    log_level: str = DEFAULTS["LOG_LEVEL"]
    log_file_path: Path | None = None
    timestamp_format: str = DEFAULTS["TIMESTAMP_FORMAT"]
    kv_database_path: Path | None = None
    show_banner: bool = True
    enable_color: bool = True

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders ----------

def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if (v.startswith("'") and v.endswith("'")) or (v.startswith('"') and v.endswith('"')):
            v = v[1:-1]
        out[k] = v
    return out


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in {path}: {exc}") from exc


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'log': {'level': 'debug'}} -> {'LOG_LEVEL': 'debug'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _strip_env_prefix(env: Mapping[str, str]) -> dict[str, str]:
    """Keep only WEBTERM_* variables, with the prefix removed."""
    return {k[len(ENV_PREFIX):]: v for k, v in env.items()
            if k.startswith(ENV_PREFIX) and len(k) > len(ENV_PREFIX)}


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def _as_bool(key: str, val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ValueError(f"{key} must be a boolean, got: {val!r}")


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str:
    lv = _as_opt_str(val) or DEFAULTS["LOG_LEVEL"]
    up = lv.upper()
    if up not in _LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {lv!r}")
    return up


def _as_opt_path(val: Any) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    return Path(os.path.expandvars(os.path.expanduser(v))).resolve()


def _as_module_path(val: Any) -> str:
    s = str(val).strip()
    if not _MODULE_PATH_RE.fullmatch(s):
        raise ValueError(f"PLUGIN_PACKAGE must be a dotted module path, got {val!r}")
    return s


def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}


# ---------- merge & load ----------

def _merge_sources(
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    base = cwd or Path.cwd()
    env = os.environ if environ is None else environ

    merged: dict[str, Any] = dict(DEFAULTS)
    merged.update(_normalize_keys(_flatten_mapping(_load_toml_file(base / "config.toml"))))
    # .env accepts both KEY=... and WEBTERM_KEY=...
    dotenv = _load_env_file(base / ".env")
    merged.update(_normalize_keys({k: v for k, v in dotenv.items() if not k.startswith(ENV_PREFIX)}))
    merged.update(_normalize_keys(_strip_env_prefix(dotenv)))
    merged.update(_normalize_keys(_strip_env_prefix(env)))
    return merged


def _validate_and_build(config: Mapping[str, Any]) -> AppConfig:
    timestamp_format = _as_opt_str(config.get("TIMESTAMP_FORMAT"))
    if timestamp_format is None:
        raise ValueError("TIMESTAMP_FORMAT must not be empty")

    extra = {k: v for k, v in config.items() if k not in DEFAULTS}

    return AppConfig(
        plugin_package=_as_module_path(config.get("PLUGIN_PACKAGE", DEFAULTS["PLUGIN_PACKAGE"])),
        log_level=_as_log_level(config.get("LOG_LEVEL")),
        log_file_path=_as_opt_path(config.get("LOG_FILE_PATH")),
        timestamp_format=timestamp_format,
        kv_database_path=_as_opt_path(config.get("KV_DATABASE_PATH")),
        show_banner=_as_bool("SHOW_BANNER", config.get("SHOW_BANNER", DEFAULTS["SHOW_BANNER"])),
        enable_color=_as_bool("ENABLE_COLOR", config.get("ENABLE_COLOR", DEFAULTS["ENABLE_COLOR"])),
        extra=extra,
    )


# ---------- public API ----------

def load_config(
    cwd: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.
    No filesystem side-effects.
    """
    return _validate_and_build(_merge_sources(cwd, environ))
