"""Command line interface for termite."""
