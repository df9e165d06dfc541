"""Configuration loading and validation for Doclist catalogs.

This package facade re-exports all public names so that
``from doclist.config import ...`` covers the loader and validator.
"""

from __future__ import annotations

from doclist.config.loader import load_config
from doclist.config.model import DoclistConfig
from doclist.config.validator import _suggest_key, validate_config_file

__all__ = [
    "DoclistConfig",
    "_suggest_key",
    "load_config",
    "validate_config_file",
]
