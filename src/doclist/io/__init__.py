"""Shared file I/O helpers."""

from .files import read_document_text

__all__ = ["read_document_text"]
