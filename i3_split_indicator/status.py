"""Status line output for the bar."""

import logging
import sys
from typing import Optional, TextIO

from .config import IndicatorConfig
from .models import Orientation
from .state import SplitState

logger = logging.getLogger(__name__)


class StatusEmitter:
    """Prints one status line per decision and tracks the last binary split.

    This is the only writer of SplitState.
    """

    def __init__(
        self,
        state: SplitState,
        config: Optional[IndicatorConfig] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        Args:
            state: Last-split state, owned by the event loop
            config: Glyph configuration (defaults used when omitted)
            stream: Output stream (default: sys.stdout at write time)
        """
        self.state = state
        self.config = config or IndicatorConfig()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, orientation: Orientation) -> None:
        """Print the status for a resolved orientation.

        TOGGLE is resolved against the last emitted binary orientation and
        re-emitted as its opposite.
        """
        if orientation is Orientation.TOGGLE:
            resolved = self.state.toggled()
            if resolved is None:
                return
            logger.debug(f"Toggle resolved {self.state.last.value} -> {resolved.value}")
            self.emit(resolved)
            return

        if orientation.is_binary:
            self.state.remember(orientation)
        self._write(self.config.glyph_for(orientation))

    def emit_unknown(self) -> None:
        """Print an empty line: focus could not be located in the tree."""
        self._write("")

    def _write(self, line: str) -> None:
        print(line, file=self.stream, flush=True)
