"""Command-line interface for Doclist."""
