"""Custom exceptions for configuration handling."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a config file is missing, unreadable or fails validation."""

    pass
