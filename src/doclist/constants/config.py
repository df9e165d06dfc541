"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "doclist.yaml"
DEFAULT_DOCS_DIR: str = "docs"
DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset({"archive", "research"})
