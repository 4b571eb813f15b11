"""Configuration settings for mbwfont."""

from pathlib import Path

from pydantic import BaseModel, Field


class FontDefaults(BaseModel):
    """Letter size used when creating a new font."""

    width: int = Field(
        default=8,
        ge=1,
        le=0xFFFF,
        description="Pixels per letter, horizontal",
    )
    height: int = Field(
        default=14,
        ge=1,
        le=0xFFFF,
        description="Pixels per letter, vertical",
    )


class DisplayConfig(BaseModel):
    """Characters used to draw letters as text."""

    ink: str = Field(
        default="#",
        min_length=1,
        max_length=1,
        description="Character for set pixels",
    )
    paper: str = Field(
        default=".",
        min_length=1,
        max_length=1,
        description="Character for unset pixels",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class MbwSettings(BaseModel):
    """Main application settings."""

    font: FontDefaults = Field(default_factory=FontDefaults)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> MbwSettings:
    """Get default application settings."""
    return MbwSettings()
