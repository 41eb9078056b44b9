"""Semantic outcome events emitted to the presentation layer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .task import Task


class EventKind(Enum):
    """Things the user is told about."""
    WELCOME = "welcome"
    FAREWELL = "farewell"
    TASK_ADDED = "task_added"
    TASK_MARKED = "task_marked"
    TASK_UNMARKED = "task_unmarked"
    TASK_REMOVED = "task_removed"
    TASK_LIST = "task_list"
    EMPTY_LIST = "empty_list"
    INVALID_TASK_NUMBER = "invalid_task_number"
    INPUT_ERROR = "input_error"
    SAVE_FAILED = "save_failed"
    LOAD_FAILED = "load_failed"


@dataclass
class Event:
    """One outcome, carrying only the data its kind needs."""
    kind: EventKind
    task: Optional[Task] = None
    size: Optional[int] = None
    entries: List[Tuple[int, Task]] = field(default_factory=list)
    message: Optional[str] = None
    suggestions: List[str] = field(default_factory=list)


EventSink = Callable[[Event], None]
