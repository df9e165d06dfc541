"""Constants for catalog report formatting."""

from __future__ import annotations

REPORT_TITLE_TEMPLATE: str = "Listing all markdown files in {label}:"
EMPTY_CATALOG_TEMPLATE: str = "No markdown files found in {label}."
SUMMARY_SEPARATOR: str = " - "
HINT_LINE_PREFIX: str = "  Read when: "
HINT_JOINER: str = "; "
REMINDER_LINE: str = (
    "Reminder: keep docs up to date as behavior changes; update summary/read_when when you edit a doc."
)

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"

STATUS_COLORS: dict[str, str] = {
    "missing-delimiter": ANSI_RED,
    "unterminated-block": ANSI_RED,
    "missing-summary-key": ANSI_YELLOW,
    "empty-summary": ANSI_YELLOW,
}
