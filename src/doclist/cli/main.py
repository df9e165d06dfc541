"""CLI entrypoint for Doclist."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from doclist import __version__
from doclist.config import load_config, validate_config_file
from doclist.constants.branding import CLI_DESCRIPTION
from doclist.exceptions import ConfigError, DocsRootError
from doclist.exceptions.validation import format_errors
from doclist.scanner import list_documents


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="doclist",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", help="Catalog documents and their front-matter summaries")
    list_cmd.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path (default: .)")
    list_cmd.add_argument(
        "-d",
        "--docs-dir",
        default=None,
        help="Documents directory relative to the project root (overrides config)",
    )
    list_cmd.add_argument("-c", "--config", type=Path, help="Explicit config file")
    list_cmd.add_argument("--no-color", action="store_true", help="Disable colored output")
    list_cmd.add_argument("-v", "--verbose", action="store_true", help="Show discovery diagnostics")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without listing")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path (default: .)")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "list":
        parser.error(f"Unsupported command: {args.command}")

    validation_errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    docs_dir = args.docs_dir if args.docs_dir is not None else config.docs_dir
    docs_root = args.root / docs_dir
    use_color = not args.no_color and sys.stdout.isatty()

    try:
        list_documents(
            docs_root,
            sys.stdout,
            exclude_dirs=config.exclude_dirs,
            docs_label=docs_dir,
            color=use_color,
        )
    except DocsRootError as exc:
        print(f"Filesystem error: {exc}", file=sys.stderr)
        return 1

    return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run config validation and report results."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
