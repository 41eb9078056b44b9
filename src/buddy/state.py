"""Application state threaded through parsing and execution."""

import logging
from dataclasses import dataclass

from .config import ConfigModel
from .events import Event, EventKind, EventSink
from .storage import Storage
from .task_list import TaskList

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """Everything a command needs: the task list, its storage and the sink."""
    tasks: TaskList
    storage: Storage
    emit: EventSink


def create_initial_state(config: ConfigModel, emit: EventSink) -> AppState:
    """Build the application state, loading tasks from disk.

    A file that cannot be read is reported and the session starts with an
    empty list. Corrupt lines are reported one by one and skipped.
    """
    storage = Storage(config.get_data_path())

    try:
        result = storage.load()
    except (OSError, UnicodeDecodeError) as e:
        logger.info(f"Failed to load tasks from {storage.path}: {e}")
        emit(Event(EventKind.LOAD_FAILED, message=str(e)))
        return AppState(tasks=TaskList(), storage=storage, emit=emit)

    for issue in result.issues:
        emit(Event(
            EventKind.LOAD_FAILED,
            message=f"line {issue.line_number} skipped: {issue.reason}",
        ))

    return AppState(tasks=result.tasks, storage=storage, emit=emit)
