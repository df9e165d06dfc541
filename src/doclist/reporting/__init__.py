"""Catalog report rendering."""

from .stdout import CatalogReporter

__all__ = ["CatalogReporter"]
