"""Configuration model for the split indicator.

Glyph defaults are the tokens status bars already match on; logging
settings are filled in from the command line.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .models import Orientation


class IndicatorConfig(BaseModel):
    """Output tokens and logging settings."""

    vertical_glyph: str = Field(" ↓", description="Status line for a vertical split")
    horizontal_glyph: str = Field("→", description="Status line for a horizontal split")
    tabbed_glyph: str = Field("t", description="Status line for a tabbed parent")
    stacked_glyph: str = Field("s", description="Status line for a stacked parent")
    log_level: str = Field("WARNING", description="Logging level name")
    log_file: Optional[Path] = Field(None, description="Log destination (default: stderr)")

    @field_validator("vertical_glyph", "horizontal_glyph", "tabbed_glyph", "stacked_glyph")
    @classmethod
    def validate_glyph(cls, v: str) -> str:
        """Glyphs must be printable on a single status line."""
        if not v:
            raise ValueError("Glyph cannot be empty")
        if "\n" in v or "\r" in v:
            raise ValueError("Glyph cannot contain a line break")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {v}")
        return level

    def glyph_for(self, orientation: Orientation) -> Optional[str]:
        """Return the status token for a resolved orientation (None for TOGGLE)."""
        return {
            Orientation.VERTICAL: self.vertical_glyph,
            Orientation.HORIZONTAL: self.horizontal_glyph,
            Orientation.TABBED: self.tabbed_glyph,
            Orientation.STACKED: self.stacked_glyph,
        }.get(orientation)
