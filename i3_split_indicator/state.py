"""Last-split state used to resolve toggle requests."""

from dataclasses import dataclass

from .models import Orientation


@dataclass
class SplitState:
    """Holds the most recently emitted binary orientation.

    Owned by the event-processing thread for the lifetime of the process.
    Written only by StatusEmitter; never holds TABBED, STACKED or TOGGLE.
    """

    last: Orientation = Orientation.HORIZONTAL

    def remember(self, orientation: Orientation) -> None:
        """Record a binary orientation as the last emitted split.

        Raises:
            ValueError: If orientation is not VERTICAL or HORIZONTAL
        """
        if not orientation.is_binary:
            raise ValueError(f"Cannot store non-binary orientation: {orientation.value}")
        self.last = orientation

    def toggled(self) -> Orientation:
        """Return the orientation a toggle request resolves to."""
        return self.last.opposite
