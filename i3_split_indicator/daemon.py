"""Split indicator daemon.

Holds two i3 IPC connections for the process lifetime: one for tree
queries and commands, one dedicated to the event stream. Events are
handled one at a time, in order, on the listener's thread.
"""

import argparse
import logging
import signal
import sys
from typing import Any, Callable, Iterable, Optional

import i3ipc
from i3ipc import Event

from . import __version__
from .config import IndicatorConfig
from .decision import SplitDecider
from .state import SplitState
from .status import StatusEmitter

logger = logging.getLogger(__name__)


class IndicatorConnectionError(ConnectionError):
    """Raised when an i3 IPC connection cannot be established."""


def connect(role: str, factory: Optional[Callable[[], Any]] = None) -> Any:
    """Open an i3 IPC connection.

    Args:
        role: Connection purpose, used in log and error messages
        factory: Connection constructor (default: i3ipc.Connection)

    Raises:
        IndicatorConnectionError: If i3/sway is not reachable
    """
    factory = factory or i3ipc.Connection
    try:
        conn = factory()
    except Exception as e:
        raise IndicatorConnectionError(f"Problem connecting to i3 ({role}): {e}") from e
    logger.info(f"Connected to i3 ({role})")
    return conn


class SplitIndicatorDaemon:
    """Routes window and binding events to the split decider."""

    def __init__(self, conn: Any, listener: Any, config: Optional[IndicatorConfig] = None):
        """
        Args:
            conn: Connection for get_tree/command
            listener: Connection used only for event subscription
            config: Indicator configuration
        """
        self.conn = conn
        self.listener = listener
        self.config = config or IndicatorConfig()
        self.state = SplitState()
        self.emitter = StatusEmitter(self.state, self.config)
        self.decider = SplitDecider(conn, self.emitter)

    def subscribe(self) -> None:
        """Register window and binding handlers on the listener connection."""
        self.listener.on(Event.WINDOW, self.dispatch)
        self.listener.on(Event.BINDING, self.dispatch)
        logger.info("Subscribed to i3 events (window, binding)")

    def dispatch(self, _conn: Any, event: Any) -> None:
        """Handle one event; failures are logged and never stop the loop."""
        try:
            if isinstance(event, i3ipc.WindowEvent):
                logger.debug(f"Window event: {event.change}")
                self.decider.set_layout()
            elif isinstance(event, i3ipc.BindingEvent):
                command = event.binding.command
                logger.debug(f"Binding event: {command!r}")
                self.decider.handle_keybind(command)
            else:
                logger.warning(f"Unexpected event type: {type(event).__name__}")
        except Exception as e:
            logger.error(f"Error handling event: {e}", exc_info=True)

    def run(self) -> None:
        """Block on the event stream until the listener connection closes."""
        self.subscribe()
        self.listener.main()
        logger.info("Event stream closed")


def setup_logging(config: IndicatorConfig) -> None:
    """Configure logging; stdout stays reserved for status lines."""
    kwargs = {}
    if config.log_file is not None:
        kwargs["filename"] = str(config.log_file)
    else:
        kwargs["stream"] = sys.stderr
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        **kwargs,
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i3-split-indicator",
        description="Print the split orientation of the focused i3/sway container for a status bar",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to PATH instead of stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"i3-split-indicator {__version__}",
    )
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    config = IndicatorConfig(
        log_level="DEBUG" if args.verbose else "WARNING",
        log_file=args.log_file,
    )
    setup_logging(config)

    try:
        conn = connect("commands")
        listener = connect("events")
    except IndicatorConnectionError as e:
        logger.critical(str(e))
        sys.exit(str(e))

    daemon = SplitIndicatorDaemon(conn, listener, config)

    signal.signal(signal.SIGINT, lambda *_args: sys.exit(0))
    signal.signal(signal.SIGTERM, lambda *_args: sys.exit(0))

    daemon.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
