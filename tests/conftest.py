"""Pytest configuration and fixtures for i3 split indicator tests."""

import io
import sys
from pathlib import Path

import pytest

# Make the package importable without installation
package_root = Path(__file__).parent.parent
if str(package_root) not in sys.path:
    sys.path.insert(0, str(package_root))

from fixtures.mock_i3 import MockI3Connection, create_workspace  # noqa: E402
from i3_split_indicator.decision import SplitDecider  # noqa: E402
from i3_split_indicator.state import SplitState  # noqa: E402
from i3_split_indicator.status import StatusEmitter  # noqa: E402


@pytest.fixture
def output():
    """Captured status output stream."""
    return io.StringIO()


@pytest.fixture
def state():
    """Fresh last-split state (starts HORIZONTAL)."""
    return SplitState()


@pytest.fixture
def emitter(state, output):
    return StatusEmitter(state, stream=output)


@pytest.fixture
def mock_conn():
    """Connection serving a landscape 1920x1080 workspace."""
    return MockI3Connection(create_workspace(1920, 1080))


@pytest.fixture
def decider(mock_conn, emitter):
    return SplitDecider(mock_conn, emitter)
