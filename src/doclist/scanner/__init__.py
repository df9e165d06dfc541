"""Document discovery and catalog assembly."""

from __future__ import annotations

from typing import Any

__all__ = ["build_catalog", "discover_documents", "list_documents"]


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs to avoid import cycles at package import time."""
    if name in {"build_catalog", "list_documents"}:
        from . import catalog

        return getattr(catalog, name)
    if name == "discover_documents":
        from .discovery import discover_documents

        return discover_documents
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
