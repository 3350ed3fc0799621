"""Configuration discovery and loading."""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:
    import tomllib  # Python 3.11+
except ImportError:  # pragma: no cover
    import tomli as tomllib

from pydantic import ValidationError

from .defaults import DEFAULT_CONFIG_DICT
from .errors import ConfigurationError
from .schema import CmdtypeConfig

CONFIG_ENV = "CMDTYPE_CONFIG"
BINARY_ENV = "BUILTIN_TYPE_BIN"
HOME_CONFIG_NAME = ".cmdtype.toml"


def _home() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as exc:
        raise ConfigurationError(f"Cannot determine home directory: {exc}") from exc


def locate_config_file(explicit: Optional[Path] = None) -> Optional[Path]:
    """Locate the configuration file using the documented priority order."""
    if explicit is not None:
        path = Path(explicit).expanduser()
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        return path.resolve()

    env_override = os.environ.get(CONFIG_ENV)
    if env_override:
        path = Path(env_override).expanduser()
        if not path.exists():
            raise ConfigurationError(f"{CONFIG_ENV} points to missing file: {path}")
        return path.resolve()

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        candidate = Path(xdg_home).expanduser() / "cmdtype" / "config.toml"
        if candidate.exists():
            return candidate.resolve()

    candidate = _home() / HOME_CONFIG_NAME
    if candidate.exists():
        return candidate.resolve()

    return None


def load_toml(path: Path) -> Dict[str, Any]:
    """Load a TOML file with helpful error reporting."""
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc
    except OSError as exc:  # pragma: no cover - file permission/path errors
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge dictionaries, returning a new dict."""
    result: Dict[str, Any] = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def load_config(explicit: Optional[Path] = None) -> CmdtypeConfig:
    """Load and validate the effective configuration."""
    config_data = copy.deepcopy(DEFAULT_CONFIG_DICT)
    if config_path := locate_config_file(explicit):
        config_data = merge_configs(config_data, load_toml(config_path))
    try:
        return CmdtypeConfig.from_dict(config_data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


def resolve_binary(config: CmdtypeConfig) -> str:
    """Return the lookup binary override; the environment wins over the file."""
    return os.environ.get(BINARY_ENV) or config.builtin_type_bin
