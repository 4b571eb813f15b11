"""Utility functions for mbwfont.

This module provides logging setup and configuration.
"""

from mbwfont.utils.logging import configure_logging, log_font_summary

__all__ = [
    "configure_logging",
    "log_font_summary",
]
