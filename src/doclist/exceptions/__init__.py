"""Shared exception hierarchy for Doclist."""

from __future__ import annotations

from .base import DoclistError
from .config import ConfigError
from .discovery import DocsRootError

__all__ = [
    "ConfigError",
    "DocsRootError",
    "DoclistError",
]
