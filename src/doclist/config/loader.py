"""Config loading and normalization for Doclist catalogs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from doclist.config.model import DoclistConfig
from doclist.constants.config import CONFIG_FILENAME, DEFAULT_DOCS_DIR, DEFAULT_EXCLUDED_DIRS
from doclist.constants.validation import ALLOWED_CONFIG_KEYS
from doclist.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> DoclistConfig:
    """Load and validate catalog config from ``doclist.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No %s under %s; using defaults", CONFIG_FILENAME, root)
        return DoclistConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    docs_dir = raw.get("docs_dir", DEFAULT_DOCS_DIR)
    if not isinstance(docs_dir, str) or not docs_dir.strip():
        raise ConfigError("docs_dir must be a non-empty string")

    exclude_dirs = _ensure_string_list(raw.get("exclude_dirs", sorted(DEFAULT_EXCLUDED_DIRS)), "exclude_dirs")

    return DoclistConfig(
        docs_dir=docs_dir.strip(),
        exclude_dirs=frozenset(name.strip() for name in exclude_dirs if name.strip()),
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
