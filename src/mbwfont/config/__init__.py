"""Configuration management for mbwfont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontDefaults: Letter size for new fonts
- DisplayConfig: Text rendering of letters
- LoggingConfig: Logging settings
- MbwSettings: Main application settings
"""

from mbwfont.config.settings import (
    DisplayConfig,
    FontDefaults,
    LoggingConfig,
    MbwSettings,
    get_default_settings,
)

__all__ = [
    "DisplayConfig",
    "FontDefaults",
    "LoggingConfig",
    "MbwSettings",
    "get_default_settings",
]
