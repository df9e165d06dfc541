"""Shared pytest fixtures for building documents trees."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """Return an empty, existing documents directory."""
    root = tmp_path / "docs"
    root.mkdir()
    return root


@pytest.fixture
def write_docs(docs_root: Path) -> Callable[[dict[str, str]], Path]:
    """Return a helper that writes ``{relative_path: content}`` under ``docs_root``."""

    def _write(files: dict[str, str]) -> Path:
        for relative, content in files.items():
            target = docs_root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return docs_root

    return _write
