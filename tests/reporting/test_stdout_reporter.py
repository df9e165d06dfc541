"""Tests for the catalog stdout reporter."""

from __future__ import annotations

import io

import pytest

from doclist.constants.reporting import ANSI_RED, ANSI_RESET, ANSI_YELLOW, REMINDER_LINE
from doclist.model import (
    CatalogEntry,
    EmptySummary,
    Extracted,
    FrontMatter,
    MissingDelimiter,
    MissingSummaryKey,
    UnterminatedBlock,
)
from doclist.reporting import CatalogReporter


def _render(*entries: CatalogEntry, color: bool = False) -> list[str]:
    return CatalogReporter(entries, docs_label="docs", color=color).render().splitlines()


def test_success_with_hints_renders_summary_and_hint_line() -> None:
    lines = _render(CatalogEntry("api.md", Extracted("REST API", ("API", "auth", "API"))))

    assert lines[1:3] == ["api.md - REST API", "  Read when: API; auth; API"]


def test_success_without_hints_has_no_hint_line() -> None:
    lines = _render(CatalogEntry("plain.md", Extracted("Plain doc")))

    assert lines == ["Listing all markdown files in docs:", "plain.md - Plain doc", "", REMINDER_LINE]


@pytest.mark.parametrize(
    ("result", "code"),
    [
        (MissingDelimiter(), "[missing-delimiter]"),
        (UnterminatedBlock(), "[unterminated-block]"),
        (MissingSummaryKey(read_when=("ignored",)), "[missing-summary-key]"),
        (EmptySummary(read_when=("ignored",)), "[empty-summary]"),
    ],
)
def test_failures_render_reason_code_and_never_hints(result: FrontMatter, code: str) -> None:
    lines = _render(CatalogEntry("doc.md", result))

    assert lines[1] == f"doc.md - {code}"
    assert not any("Read when" in line for line in lines)


def test_empty_catalog_renders_explanatory_line() -> None:
    lines = _render()

    assert lines == [
        "Listing all markdown files in docs:",
        "No markdown files found in docs.",
        "",
        REMINDER_LINE,
    ]


def test_report_always_ends_with_reminder() -> None:
    rendered = CatalogReporter([CatalogEntry("a.md", MissingDelimiter())], docs_label="docs").render()

    assert rendered.endswith(REMINDER_LINE + "\n")


def test_color_wraps_failure_codes_only() -> None:
    lines = _render(
        CatalogEntry("a.md", Extracted("Fine")),
        CatalogEntry("b.md", MissingDelimiter()),
        CatalogEntry("c.md", EmptySummary()),
        color=True,
    )

    assert lines[1] == "a.md - Fine"
    assert lines[2] == f"b.md - {ANSI_RED}[missing-delimiter]{ANSI_RESET}"
    assert lines[3] == f"c.md - {ANSI_YELLOW}[empty-summary]{ANSI_RESET}"


def test_write_emits_rendered_text() -> None:
    reporter = CatalogReporter([CatalogEntry("a.md", Extracted("A"))], docs_label="docs")
    stream = io.StringIO()

    reporter.write(stream)

    assert stream.getvalue() == reporter.render()


def test_unknown_result_type_is_rejected() -> None:
    reporter = CatalogReporter([CatalogEntry("a.md", "oops")], docs_label="docs")  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="a.md"):
        reporter.render()
