"""Ordered, positionally addressed collection of tasks."""

from typing import Iterable, Iterator, List, Optional, Tuple

from .task import Task


class TaskList:
    """In-memory task list.

    Positions are 1-based for every public method. Removing a task shifts the
    tasks after it down by one position.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []

    def add(self, task: Task) -> int:
        """Append a task and return the new size."""
        self._tasks.append(task)
        return len(self._tasks)

    def is_valid_index(self, index: int) -> bool:
        return 1 <= index <= len(self._tasks)

    def get(self, index: int) -> Task:
        """Return the task at a 1-based position.

        Raises:
            IndexError: If index is outside [1, size]
        """
        self._check_index(index)
        return self._tasks[index - 1]

    def remove(self, index: int) -> Task:
        """Remove and return the task at a 1-based position.

        Raises:
            IndexError: If index is outside [1, size]
        """
        self._check_index(index)
        return self._tasks.pop(index - 1)

    def size(self) -> int:
        return len(self._tasks)

    def iterate(self) -> Iterator[Tuple[int, Task]]:
        """Yield ``(position, task)`` pairs in insertion order."""
        return enumerate(self._tasks, start=1)

    def _check_index(self, index: int):
        if not self.is_valid_index(index):
            raise IndexError(
                f"Task number {index} out of range (1-{len(self._tasks)})"
            )

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __bool__(self) -> bool:
        return bool(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"
