"""Inline label picker for Textual applications."""

__version__ = "0.3.0"
