"""Configuration-related exceptions."""

from __future__ import annotations

from doclist.exceptions.base import DoclistError


class ConfigError(DoclistError, ValueError):
    """Raised when catalog configuration is invalid."""
