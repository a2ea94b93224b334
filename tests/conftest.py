"""
Pytest configuration and fixtures.
"""

import asyncio
import io
import sys
from pathlib import Path

import pytest

src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from rich.console import Console  # noqa: E402

from speedview.schemas import Snapshot  # noqa: E402
from speedview.services import MeasurementEngine  # noqa: E402


def pytest_configure(config):
    """Register markers used below."""
    config.addinivalue_line("markers", "timing: depends on event loop timing")
    config.addinivalue_line("markers", "integration: runs a whole measurement view")


def pytest_collection_modifyitems(config, items):
    """
    Modify test items to add helpful markers.
    """
    for item in items:
        if "ticker" in item.nodeid.lower():
            item.add_marker("timing")
        if "cli" in item.nodeid.lower() or "dashboard" in item.nodeid.lower():
            item.add_marker("integration")


class ScriptedEngine(MeasurementEngine):
    """Engine that yields a fixed list of snapshots, then optionally raises."""

    def __init__(self, snapshots, error=None, delay=0.0):
        self.snapshots = [
            s if isinstance(s, Snapshot) else Snapshot.model_validate(s)
            for s in snapshots
        ]
        self.error = error
        self.delay = delay
        self.options = None

    async def stream(self, options):
        self.options = options
        for snapshot in self.snapshots:
            if self.delay:
                await asyncio.sleep(self.delay)
            yield snapshot
        if self.error is not None:
            raise self.error


def make_console(terminal: bool) -> Console:
    return Console(
        file=io.StringIO(),
        force_terminal=terminal,
        width=100,
        color_system="standard" if terminal else None,
    )


@pytest.fixture
def scripted_engine():
    return ScriptedEngine


@pytest.fixture
def pipe_console() -> Console:
    return make_console(terminal=False)


@pytest.fixture
def tty_console() -> Console:
    return make_console(terminal=True)


@pytest.fixture
def error_console() -> Console:
    return make_console(terminal=False)


@pytest.fixture
def upload_sequence():
    return [
        {"downloadSpeed": 17, "downloadUnit": "Mbps", "isDone": False},
        {
            "downloadSpeed": 17,
            "downloadUnit": "Mbps",
            "uploadSpeed": 4.4,
            "uploadUnit": "Mbps",
            "isDone": True,
        },
    ]
