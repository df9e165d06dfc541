"""Plain-text stdout reporter for document catalogs."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from doclist.constants.reporting import (
    ANSI_RESET,
    EMPTY_CATALOG_TEMPLATE,
    HINT_JOINER,
    HINT_LINE_PREFIX,
    REMINDER_LINE,
    REPORT_TITLE_TEMPLATE,
    STATUS_COLORS,
    SUMMARY_SEPARATOR,
)
from doclist.model import (
    CatalogEntry,
    EmptySummary,
    Extracted,
    MissingDelimiter,
    MissingSummaryKey,
    UnterminatedBlock,
)


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class CatalogReporter:
    """Formats catalog entries as a deterministic, line-oriented report."""

    def __init__(
        self,
        entries: Sequence[CatalogEntry],
        *,
        docs_label: str,
        color: bool = False,
    ) -> None:
        """Initialise the reporter."""
        self._entries = entries
        self._docs_label = docs_label
        self._color = color

    def render(self) -> str:
        """Render the full report as a single newline-terminated string."""
        lines = [REPORT_TITLE_TEMPLATE.format(label=self._docs_label)]
        if not self._entries:
            lines.append(EMPTY_CATALOG_TEMPLATE.format(label=self._docs_label))
        for entry in self._entries:
            lines.extend(self._render_entry(entry))
        lines.extend(["", REMINDER_LINE])
        return "\n".join(lines) + "\n"

    def write(self, stream: TextIO) -> None:
        """Write the rendered report to *stream*."""
        stream.write(self.render())

    def _render_entry(self, entry: CatalogEntry) -> list[str]:
        match entry.front_matter:
            case Extracted(summary=summary, read_when=hints):
                lines = [f"{entry.path}{SUMMARY_SEPARATOR}{summary}"]
                if hints:
                    lines.append(f"{HINT_LINE_PREFIX}{HINT_JOINER.join(hints)}")
                return lines
            case MissingDelimiter() | UnterminatedBlock() | MissingSummaryKey() | EmptySummary():
                return [f"{entry.path}{SUMMARY_SEPARATOR}{self._reason(entry.front_matter.status)}"]
            case other:
                raise TypeError(f"Unsupported front-matter result for {entry.path}: {other!r}")

    def _reason(self, status: str) -> str:
        reason = f"[{status}]"
        color = STATUS_COLORS.get(status, "")
        return _colorize(reason, color) if self._color and color else reason
