"""Shared type aliases for Doclist."""

from .common import DocumentRef, ExtractionStatus, ScannerState

__all__ = [
    "DocumentRef",
    "ExtractionStatus",
    "ScannerState",
]
