"""Split decisions driven by tree state and key bindings.

Both entry points are best-effort: any missing data, failed IPC call or
unparseable token abandons the current event without output.
"""

import logging
from typing import Any, Optional

from .models import SPLIT_COMMANDS, Orientation
from .status import StatusEmitter
from .tree import find_focused_parent, is_wider_than_tall

logger = logging.getLogger(__name__)

# Binding verbs that change focus; the indicator is recomputed from the tree
FOCUS_CHANGING_VERBS = ("move", "focus", "workspace")


class SplitDecider:
    """Decides the split orientation and reports it through StatusEmitter."""

    def __init__(self, conn: Any, emitter: StatusEmitter):
        """
        Args:
            conn: i3ipc Connection used for tree queries and commands
            emitter: Status emitter owning the last-split state
        """
        self.conn = conn
        self.emitter = emitter

    def set_layout(self) -> None:
        """Pick a split for the focused container from the current tree.

        Tabbed/stacked parents are only mirrored. Otherwise the split runs
        along the shorter side: wider than tall -> horizontal, anything
        else (including square) -> vertical.
        """
        try:
            tree = self.conn.get_tree()
        except Exception as e:
            logger.debug(f"Tree fetch failed, skipping event: {e}")
            return

        parent = find_focused_parent(tree)
        if parent is None:
            logger.debug("No focused container found")
            self.emitter.emit_unknown()
            return

        enforced = Orientation.from_layout(parent.layout)
        if enforced is not None:
            logger.debug(f"Parent layout is {parent.layout}, mirroring only")
            self.emitter.emit(enforced)
            return

        if is_wider_than_tall(parent):
            orientation = Orientation.HORIZONTAL
        else:
            orientation = Orientation.VERTICAL

        if not self._run_command(SPLIT_COMMANDS[orientation]):
            return
        self.emitter.emit(orientation)

    def handle_keybind(self, command: str) -> None:
        """React to a triggered binding's command string.

        Supported forms: ``split <o>``, ``layout <o|splith|splitv>`` and the
        focus-changing verbs ``move``/``focus``/``workspace``. Anything else
        is ignored.
        """
        tokens = iter(command.split(" "))
        verb = next(tokens, None)

        if verb == "split":
            orientation = self._parse_next(tokens)
            if orientation is not None:
                self.emitter.emit(orientation)
        elif verb in FOCUS_CHANGING_VERBS:
            self.set_layout()
        elif verb == "layout":
            argument = next(tokens, None)
            if argument is None:
                return
            # layout splith / splitv
            token = argument[-1] if argument.startswith("split") else argument
            orientation = Orientation.parse(token)
            if orientation is not None:
                self.emitter.emit(orientation)
        else:
            logger.debug(f"Ignoring binding command: {command!r}")

    def _parse_next(self, tokens) -> Optional[Orientation]:
        token = next(tokens, None)
        if token is None:
            return None
        return Orientation.parse(token)

    def _run_command(self, command: str) -> bool:
        """Send a command to i3. Returns False if the IPC call itself failed."""
        try:
            replies = self.conn.command(command)
        except Exception as e:
            logger.debug(f"Command {command!r} failed, skipping event: {e}")
            return False

        for reply in replies or []:
            if not getattr(reply, "success", True):
                logger.warning(f"i3 rejected {command!r}: {getattr(reply, 'error', None)}")
        return True
