"""Command values and their execution against the application state."""

import logging
from dataclasses import dataclass
from typing import Union

from .events import Event, EventKind
from .state import AppState
from .task import Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddCommand:
    task: Task


@dataclass(frozen=True)
class MarkCommand:
    index: int


@dataclass(frozen=True)
class UnmarkCommand:
    index: int


@dataclass(frozen=True)
class DeleteCommand:
    index: int


@dataclass(frozen=True)
class ListCommand:
    pass


@dataclass(frozen=True)
class ByeCommand:
    pass


Command = Union[AddCommand, MarkCommand, UnmarkCommand, DeleteCommand, ListCommand, ByeCommand]


def execute(command: Command, state: AppState) -> bool:
    """Apply a command to the state and emit its outcome.

    Returns:
        False once the session should end, True otherwise
    """
    tasks = state.tasks
    emit = state.emit

    if isinstance(command, ListCommand):
        if not tasks:
            emit(Event(EventKind.EMPTY_LIST))
        else:
            emit(Event(EventKind.TASK_LIST, entries=list(tasks.iterate())))
        return True

    if isinstance(command, AddCommand):
        size = tasks.add(command.task)
        emit(Event(EventKind.TASK_ADDED, task=command.task, size=size))
        _save(state)
        return True

    if isinstance(command, (MarkCommand, UnmarkCommand)):
        if not tasks.is_valid_index(command.index):
            emit(Event(EventKind.INVALID_TASK_NUMBER, size=tasks.size()))
            return True
        task = tasks.get(command.index)
        if isinstance(command, MarkCommand):
            task.mark_done()
            emit(Event(EventKind.TASK_MARKED, task=task))
        else:
            task.mark_not_done()
            emit(Event(EventKind.TASK_UNMARKED, task=task))
        _save(state)
        return True

    if isinstance(command, DeleteCommand):
        if not tasks.is_valid_index(command.index):
            emit(Event(EventKind.INVALID_TASK_NUMBER, size=tasks.size()))
            return True
        removed = tasks.remove(command.index)
        emit(Event(EventKind.TASK_REMOVED, task=removed, size=tasks.size()))
        _save(state)
        return True

    if isinstance(command, ByeCommand):
        emit(Event(EventKind.FAREWELL))
        return False

    raise TypeError(f"Unsupported command: {command!r}")


def _save(state: AppState):
    # in-memory changes are kept even when the write fails
    try:
        state.storage.save(state.tasks)
    except (OSError, ValueError) as e:
        # ValueError: a description the line format cannot hold
        logger.info(f"Failed to save tasks to {state.storage.path}: {e}")
        state.emit(Event(EventKind.SAVE_FAILED, message=str(e)))
