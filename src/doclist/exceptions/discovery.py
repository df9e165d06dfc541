"""Filesystem exceptions raised while walking the documents directory."""

from __future__ import annotations

from doclist.exceptions.base import DoclistError


class DocsRootError(DoclistError, OSError):
    """Raised when the documents root is missing, not a directory, or unreadable."""
