"""Textual UI for quickpalette."""
