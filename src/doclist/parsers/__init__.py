"""Document parsers."""

from .frontmatter import extract_front_matter, parse_front_matter

__all__ = ["extract_front_matter", "parse_front_matter"]
