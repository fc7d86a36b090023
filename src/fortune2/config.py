"""fortune2 configuration loader.

Priority (high → low):
  1. CLI flags           (handled at the call site)
  2. Environment variables  (FORTUNE2FILE, FORTUNE2_LOG_LEVEL)
  3. Per-project fortune2.yaml  (current working directory)
  4. Global ~/.fortune2/config.yaml
  5. Hardcoded defaults

All YAML reads use yaml.safe_load(), never yaml.load().
"""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from fortune2.selection import SelectionMode

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_GLOBAL_CONFIG_DIR: Path = Path.home() / ".fortune2"
_GLOBAL_CONFIG_PATH: Path = _GLOBAL_CONFIG_DIR / "config.yaml"
_PROJECT_CONFIG_NAME: str = "fortune2.yaml"

DEFAULT_DB_PATH: Path = Path("/usr/local/share/fortune2/fortune2.db")
DB_ENV_VAR: str = "FORTUNE2FILE"
LOG_LEVEL_ENV_VAR: str = "FORTUNE2_LOG_LEVEL"

_LOG_LEVELS: frozenset[str] = frozenset(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])

# Known top-level sections; unknown keys produce a warning
_KNOWN_SECTIONS: frozenset[str] = frozenset(["store", "server", "selection", "logging"])


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(ValueError):
    """Raised when a config file or environment variable holds an invalid value."""


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass
class StoreCfg:
    """Fortune database location (fortune2.yaml: store:)."""

    path: Path = DEFAULT_DB_PATH


@dataclass
class ServerCfg:
    """HTTP server settings (fortune2.yaml: server:).

    Attributes:
        host: Interface to bind.
        port: TCP port.
        asset_dir: Directory served under /asset/.
    """

    host: str = "0.0.0.0"
    port: int = 8000
    asset_dir: Path = Path("asset")


@dataclass
class SelectionCfg:
    """Default jar selection mode (fortune2.yaml: selection:)."""

    mode: SelectionMode = SelectionMode.WEIGHTED


@dataclass
class LoggingCfg:
    level: str = "WARNING"


@dataclass
class Fortune2Config:
    """Root configuration object, built by load_config() from merged YAML layers."""

    store: StoreCfg = field(default_factory=StoreCfg)
    server: ServerCfg = field(default_factory=ServerCfg)
    selection: SelectionCfg = field(default_factory=SelectionCfg)
    logging: LoggingCfg = field(default_factory=LoggingCfg)


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def _warn_unknown_keys(data: dict[str, Any], source: Path) -> None:
    """Emit a UserWarning for unrecognised top-level keys."""
    for key in data:
        if key not in _KNOWN_SECTIONS:
            warnings.warn(
                f"Unknown config key '{key}' in '{source}' — ignored.",
                UserWarning,
                stacklevel=4,
            )


def _parse_port(value: Any) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"server.port must be an integer, got {value!r}") from None
    if not 0 < port < 65536:
        raise ConfigError(f"server.port must be between 1 and 65535, got {port}")
    return port


def _parse_mode(value: Any) -> SelectionMode:
    try:
        return SelectionMode(str(value).lower())
    except ValueError:
        choices = ", ".join(m.value for m in SelectionMode)
        raise ConfigError(f"selection.mode must be one of: {choices}; got {value!r}") from None


def _parse_level(value: Any) -> str:
    level = str(value).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of: {', '.join(sorted(_LOG_LEVELS))}; got {value!r}")
    return level


# ---------------------------------------------------------------------------
# Merge + build
# ---------------------------------------------------------------------------


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return a new dict that is *base* deep-merged with *override*."""
    result = dict(base)
    for k, v in override.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def _cfg_from_dict(data: dict[str, Any]) -> Fortune2Config:
    """Build a *Fortune2Config* from a merged raw YAML dict."""
    cfg = Fortune2Config()

    if "store" in data:
        s = data["store"] or {}
        if s.get("path"):
            cfg.store = StoreCfg(path=Path(str(s["path"])).expanduser())

    if "server" in data:
        srv = data["server"] or {}
        cfg.server = ServerCfg(
            host=str(srv.get("host", cfg.server.host)),
            port=_parse_port(srv.get("port", cfg.server.port)),
            asset_dir=Path(str(srv.get("asset_dir", cfg.server.asset_dir))).expanduser(),
        )

    if "selection" in data:
        sel = data["selection"] or {}
        cfg.selection = SelectionCfg(mode=_parse_mode(sel.get("mode", cfg.selection.mode.value)))

    if "logging" in data:
        lg = data["logging"] or {}
        cfg.logging = LoggingCfg(level=_parse_level(lg.get("level", cfg.logging.level)))

    return cfg


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file '{path}' is not valid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file '{path}' must contain a mapping at the top level.")
    return raw


def _apply_env_overrides(cfg: Fortune2Config) -> Fortune2Config:
    """Apply environment variable overrides (layer 2)."""
    if db := os.environ.get(DB_ENV_VAR):
        cfg.store.path = Path(db).expanduser()
    if level := os.environ.get(LOG_LEVEL_ENV_VAR):
        cfg.logging.level = _parse_level(level)
    return cfg


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(
    project_dir: Path | None = None,
    *,
    global_config_path: Path | None = None,
) -> Fortune2Config:
    """Load and return a merged *Fortune2Config*.

    Applies layers in order: global → per-project → env vars.
    CLI flag overrides must be applied by the caller after this function.

    Args:
        project_dir: Directory to search for *fortune2.yaml*. Defaults to CWD.
        global_config_path: Override the global config path (for testing).

    Raises:
        ConfigError: If a config file is malformed or holds an invalid value.
    """
    global_path = global_config_path if global_config_path is not None else _GLOBAL_CONFIG_PATH
    search_dir = project_dir if project_dir is not None else Path.cwd()

    merged: dict[str, Any] = {}

    # Layer 1: global config
    if global_path.exists():
        raw_global = _read_yaml(global_path)
        _warn_unknown_keys(raw_global, global_path)
        merged = _deep_merge(merged, raw_global)

    # Layer 2: per-project config
    project_cfg_path = search_dir / _PROJECT_CONFIG_NAME
    if project_cfg_path.exists():
        raw_project = _read_yaml(project_cfg_path)
        _warn_unknown_keys(raw_project, project_cfg_path)
        merged = _deep_merge(merged, raw_project)

    cfg = _cfg_from_dict(merged)

    # Layer 3: env var overrides
    return _apply_env_overrides(cfg)
