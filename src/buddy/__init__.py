"""Buddy - a text-driven task tracker with flat-file persistence."""

__version__ = "0.1.0"
__author__ = "Buddy Team"

from .task import Task, TaskKind, DateFormatError
from .task_list import TaskList
from .codec import encode, decode, CorruptLineError, UnrecognizedTaskTypeError
from .storage import Storage, LoadResult, LoadIssue
from .parser import CommandParser, ParseError, parse_command
from .commands import (
    AddCommand,
    MarkCommand,
    UnmarkCommand,
    DeleteCommand,
    ListCommand,
    ByeCommand,
    execute,
)
from .events import Event, EventKind
from .state import AppState, create_initial_state

__all__ = [
    "Task",
    "TaskKind",
    "DateFormatError",
    "TaskList",
    "encode",
    "decode",
    "CorruptLineError",
    "UnrecognizedTaskTypeError",
    "Storage",
    "LoadResult",
    "LoadIssue",
    "CommandParser",
    "ParseError",
    "parse_command",
    "AddCommand",
    "MarkCommand",
    "UnmarkCommand",
    "DeleteCommand",
    "ListCommand",
    "ByeCommand",
    "execute",
    "Event",
    "EventKind",
    "AppState",
    "create_initial_state",
    "__version__",
]
