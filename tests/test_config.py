"""Unit tests for IndicatorConfig validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from i3_split_indicator.config import IndicatorConfig
from i3_split_indicator.models import Orientation


class TestIndicatorConfig:
    """Test config defaults and validators."""

    def test_defaults(self):
        config = IndicatorConfig()
        assert config.vertical_glyph == " ↓"
        assert config.horizontal_glyph == "→"
        assert config.tabbed_glyph == "t"
        assert config.stacked_glyph == "s"
        assert config.log_level == "WARNING"
        assert config.log_file is None

    def test_glyph_for(self):
        config = IndicatorConfig()
        assert config.glyph_for(Orientation.VERTICAL) == " ↓"
        assert config.glyph_for(Orientation.HORIZONTAL) == "→"
        assert config.glyph_for(Orientation.TABBED) == "t"
        assert config.glyph_for(Orientation.STACKED) == "s"
        assert config.glyph_for(Orientation.TOGGLE) is None

    def test_empty_glyph_rejected(self):
        with pytest.raises(ValidationError):
            IndicatorConfig(tabbed_glyph="")

    def test_multiline_glyph_rejected(self):
        with pytest.raises(ValidationError):
            IndicatorConfig(vertical_glyph="a\nb")

    def test_log_level_normalized(self):
        assert IndicatorConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            IndicatorConfig(log_level="chatty")

    def test_log_file_coerced_to_path(self):
        config = IndicatorConfig(log_file="/tmp/i3-split-indicator.log")
        assert config.log_file == Path("/tmp/i3-split-indicator.log")
