"""Config data model for Doclist catalogs."""

from __future__ import annotations

from dataclasses import dataclass

from doclist.constants.config import DEFAULT_DOCS_DIR, DEFAULT_EXCLUDED_DIRS


@dataclass(frozen=True)
class DoclistConfig:
    """Resolved catalog config."""

    docs_dir: str = DEFAULT_DOCS_DIR
    exclude_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS
