"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

DocumentRef: TypeAlias = str
ExtractionStatus: TypeAlias = Literal[
    "success",
    "missing-delimiter",
    "unterminated-block",
    "missing-summary-key",
    "empty-summary",
]
ScannerState: TypeAlias = Literal["idle", "capturing-list"]
