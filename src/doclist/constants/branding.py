"""Branding constants for CLI help and report output."""

from __future__ import annotations

BRAND_NAME: str = "DOCLIST"
CLI_DESCRIPTION: str = "\n".join(
    (
        ">_ DOCLIST",
        "     // front-matter catalog for project docs",
        "",
        f"{BRAND_NAME} documentation catalog",
    )
)
