"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path
from typing import List

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from buddy.events import Event, EventKind  # noqa: E402
from buddy.state import AppState  # noqa: E402
from buddy.storage import Storage  # noqa: E402
from buddy.task_list import TaskList  # noqa: E402


class EventRecorder:
    """Event sink that keeps every event it receives."""

    def __init__(self):
        self.events: List[Event] = []

    def __call__(self, event: Event) -> None:
        self.events.append(event)

    @property
    def kinds(self) -> List[EventKind]:
        return [e.kind for e in self.events]

    def last(self) -> Event:
        return self.events[-1]


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "tasks.txt"


@pytest.fixture
def state(data_file, recorder):
    return AppState(tasks=TaskList(), storage=Storage(data_file), emit=recorder)
