"""Subcommands of the termite CLI."""
