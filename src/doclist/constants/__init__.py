"""Shared constants for Doclist."""
