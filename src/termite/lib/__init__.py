"""Shared library code for termite."""
