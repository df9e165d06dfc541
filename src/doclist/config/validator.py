"""Config file validation for Doclist catalogs."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from doclist.constants.config import CONFIG_FILENAME
from doclist.constants.validation import ALLOWED_CONFIG_KEYS, CFG001, CFG002, CFG003, CFG004, CFG005
from doclist.exceptions.validation import ValidationError, sort_errors


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a doclist.yaml file and return all validation errors.

    Used by ``doclist validate-config`` and as the ``doclist list`` preflight.
    It never raises; all problems are returned as :class:`ValidationError`
    instances in deterministic order.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    if "docs_dir" in raw:
        val = raw["docs_dir"]
        if not isinstance(val, str) or not val.strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="docs_dir",
                    message="`docs_dir` must be a non-empty string",
                    hint=f"got: {val!r}",
                )
            )

    if "exclude_dirs" in raw:
        val = raw["exclude_dirs"]
        if val is not None and (not isinstance(val, list) or not all(isinstance(item, str) for item in val)):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="exclude_dirs",
                    message="`exclude_dirs` must be a list of strings",
                )
            )

    return sort_errors(errors)


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
