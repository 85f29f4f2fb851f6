"""Split orientation model and token parsing."""

from enum import Enum
from typing import Optional


class Orientation(str, Enum):
    """Split states tracked by the indicator.

    Only VERTICAL and HORIZONTAL are ever remembered as the last split;
    TABBED, STACKED and TOGGLE are transient decision outputs.
    """
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    TABBED = "tabbed"
    STACKED = "stacked"
    TOGGLE = "toggle"

    @property
    def is_binary(self) -> bool:
        """True for the two orientations that can be stored as last split."""
        return self in (Orientation.VERTICAL, Orientation.HORIZONTAL)

    @property
    def opposite(self) -> Optional["Orientation"]:
        """Return the other binary orientation, or None for non-binary values."""
        if self is Orientation.VERTICAL:
            return Orientation.HORIZONTAL
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return None

    @classmethod
    def parse(cls, token: str) -> Optional["Orientation"]:
        """Parse a short binding token such as "v", "h", "stacking" or "toggle".

        Returns None when the token is not part of the vocabulary; callers
        treat that as "emit nothing".
        """
        return _TOKENS.get(token)

    @classmethod
    def from_layout(cls, layout: Optional[str]) -> Optional["Orientation"]:
        """Map an i3 container layout to TABBED/STACKED, else None."""
        return _ENFORCED_LAYOUTS.get(layout or "")


_TOKENS = {
    "v": Orientation.VERTICAL,
    "vertical": Orientation.VERTICAL,
    "h": Orientation.HORIZONTAL,
    "horizontal": Orientation.HORIZONTAL,
    "tabbed": Orientation.TABBED,
    "stacked": Orientation.STACKED,
    "stacking": Orientation.STACKED,
    "t": Orientation.TOGGLE,
    "toggle": Orientation.TOGGLE,
}

# Layouts i3 enforces by itself; the indicator only mirrors them
_ENFORCED_LAYOUTS = {
    "tabbed": Orientation.TABBED,
    "stacked": Orientation.STACKED,
}

# i3 commands issued for the tree-driven decision
SPLIT_COMMANDS = {
    Orientation.HORIZONTAL: "split horizontal",
    Orientation.VERTICAL: "split vertical",
}
