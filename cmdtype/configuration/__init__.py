"""Public interface for the cmdtype configuration system."""

from __future__ import annotations

from .errors import ConfigurationError
from .loader import (
    load_config,
    locate_config_file,
    merge_configs,
    resolve_binary,
)
from .schema import CmdtypeConfig

__all__ = [
    "CmdtypeConfig",
    "ConfigurationError",
    "load_config",
    "locate_config_file",
    "merge_configs",
    "resolve_binary",
]
