"""Textual user interface for the label picker."""
