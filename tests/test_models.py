"""Unit tests for orientation parsing."""

import pytest

from i3_split_indicator.models import SPLIT_COMMANDS, Orientation


class TestOrientationParse:
    """Test Orientation.parse token vocabulary."""

    @pytest.mark.parametrize("token,expected", [
        ("v", Orientation.VERTICAL),
        ("vertical", Orientation.VERTICAL),
        ("h", Orientation.HORIZONTAL),
        ("horizontal", Orientation.HORIZONTAL),
        ("tabbed", Orientation.TABBED),
        ("stacked", Orientation.STACKED),
        ("stacking", Orientation.STACKED),
        ("t", Orientation.TOGGLE),
        ("toggle", Orientation.TOGGLE),
    ])
    def test_accepted_tokens(self, token, expected):
        assert Orientation.parse(token) is expected

    @pytest.mark.parametrize("token", ["", "x", "splith", "tab", "V", "Horizontal", " v", "default"])
    def test_rejected_tokens(self, token):
        """Unknown tokens parse to None instead of raising."""
        assert Orientation.parse(token) is None


class TestOrientationHelpers:
    """Test binary/opposite helpers and layout mapping."""

    def test_binary_orientations(self):
        assert Orientation.VERTICAL.is_binary
        assert Orientation.HORIZONTAL.is_binary
        assert not Orientation.TABBED.is_binary
        assert not Orientation.STACKED.is_binary
        assert not Orientation.TOGGLE.is_binary

    def test_opposite(self):
        assert Orientation.VERTICAL.opposite is Orientation.HORIZONTAL
        assert Orientation.HORIZONTAL.opposite is Orientation.VERTICAL
        assert Orientation.TABBED.opposite is None
        assert Orientation.TOGGLE.opposite is None

    @pytest.mark.parametrize("layout,expected", [
        ("tabbed", Orientation.TABBED),
        ("stacked", Orientation.STACKED),
        ("splith", None),
        ("splitv", None),
        ("output", None),
        (None, None),
    ])
    def test_from_layout(self, layout, expected):
        assert Orientation.from_layout(layout) is expected

    def test_split_commands(self):
        assert SPLIT_COMMANDS[Orientation.HORIZONTAL] == "split horizontal"
        assert SPLIT_COMMANDS[Orientation.VERTICAL] == "split vertical"
