"""Base exception for Doclist."""

from __future__ import annotations


class DoclistError(Exception):
    """Base class for all errors raised by Doclist."""
