"""Tests for recursive document discovery."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

from doclist.constants.config import DEFAULT_EXCLUDED_DIRS
from doclist.exceptions import DocsRootError, DoclistError
from doclist.scanner.discovery import discover_documents, is_skipped_directory

VALID = "---\nsummary: ok\n---\n"


def test_orders_by_full_relative_path(write_docs: Callable[[dict[str, str]], Path]) -> None:
    root = write_docs({"b/a.md": VALID, "a/b.md": VALID, "a.md": VALID})

    assert discover_documents(root) == ["a.md", "a/b.md", "b/a.md"]


def test_nested_and_sibling_files_interleave_lexicographically(
    write_docs: Callable[[dict[str, str]], Path],
) -> None:
    root = write_docs({"guide/z.md": "", "guide-extra.md": "", "guide.md": "", "Zeta/a.md": ""})

    assert discover_documents(root) == ["Zeta/a.md", "guide-extra.md", "guide.md", "guide/z.md"]


def test_only_markdown_files_are_returned(write_docs: Callable[[dict[str, str]], Path]) -> None:
    root = write_docs({"notes.md": "", "notes.txt": "", "image.png": "", "sub/readme.MD": "", "sub/deep.md": ""})

    assert discover_documents(root) == ["notes.md", "sub/deep.md"]


def test_default_exclusions_skip_archive_at_any_depth(write_docs: Callable[[dict[str, str]], Path]) -> None:
    root = write_docs(
        {
            "archive/x.md": VALID,
            "team/archive/old.md": VALID,
            "research/spike.md": VALID,
            "team/current.md": VALID,
        }
    )

    assert discover_documents(root) == ["team/current.md"]


def test_hidden_directories_are_skipped(write_docs: Callable[[dict[str, str]], Path]) -> None:
    root = write_docs({".drafts/wip.md": VALID, "nested/.cache/tmp.md": VALID, "kept.md": VALID})

    assert discover_documents(root) == ["kept.md"]


def test_hidden_files_in_visible_directories_are_kept(write_docs: Callable[[dict[str, str]], Path]) -> None:
    root = write_docs({".template.md": VALID})

    assert discover_documents(root) == [".template.md"]


def test_exclusion_set_is_a_parameter(write_docs: Callable[[dict[str, str]], Path]) -> None:
    root = write_docs({"archive/x.md": VALID, "drafts/y.md": VALID})

    assert discover_documents(root, exclude_dirs={"drafts"}) == ["archive/x.md"]
    assert discover_documents(root, exclude_dirs=()) == ["archive/x.md", "drafts/y.md"]


def test_directory_named_like_document_is_recursed_not_yielded(
    write_docs: Callable[[dict[str, str]], Path],
) -> None:
    root = write_docs({"folder.md/inner.md": VALID})

    assert discover_documents(root) == ["folder.md/inner.md"]


def test_empty_root_returns_empty_list(docs_root: Path) -> None:
    assert discover_documents(docs_root) == []


def test_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(DocsRootError, match="not found"):
        discover_documents(tmp_path / "nope")


def test_file_root_raises(tmp_path: Path) -> None:
    target = tmp_path / "file.md"
    target.write_text(VALID, encoding="utf-8")

    with pytest.raises(DocsRootError, match="not a directory"):
        discover_documents(target)


def test_docs_root_error_is_filesystem_error() -> None:
    error = DocsRootError("boom")

    assert isinstance(error, OSError)
    assert isinstance(error, DoclistError)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("archive", True),
        ("research", True),
        (".git", True),
        ("archives", False),
        ("guides", False),
    ],
)
def test_is_skipped_directory(name: str, expected: bool) -> None:
    assert is_skipped_directory(name, DEFAULT_EXCLUDED_DIRS) is expected


def test_walk_is_restartable(write_docs: Callable[[dict[str, str]], Path]) -> None:
    root = write_docs({"a.md": VALID, "b/c.md": VALID})

    assert discover_documents(root) == discover_documents(root)


def test_symlinked_directory_is_not_followed(write_docs: Callable[[dict[str, str]], Path]) -> None:
    root = write_docs({"real/a.md": VALID})
    os.symlink(root / "real", root / "linked")
    os.symlink(root / "real" / "a.md", root / "b.md")

    assert discover_documents(root) == ["b.md", "real/a.md"]


def test_unreadable_subdirectory_raises_naming_it(
    write_docs: Callable[[dict[str, str]], Path],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    root = write_docs({"open/a.md": VALID, "locked/b.md": VALID})
    original_iterdir = Path.iterdir

    def _iterdir(self: Path):
        if self.name == "locked":
            raise PermissionError(13, "Permission denied", str(self))
        return original_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", _iterdir)

    with pytest.raises(DocsRootError, match="locked"):
        discover_documents(root)
