"""Utility modules for quickpalette.

- logging_utils: File-based logging that stays out of the TUI's way
- output: Shared rich console for CLI output
"""
