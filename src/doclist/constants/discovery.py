"""Constants for documents-directory discovery."""

from __future__ import annotations

DOCUMENT_EXTENSION: str = ".md"
HIDDEN_ENTRY_PREFIX: str = "."
