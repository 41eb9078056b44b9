"""Flat-file storage for Buddy.

The whole task list lives in one UTF-8 text file, one task per line in the
format defined by ``buddy.codec``. Every save rewrites the file from scratch.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from .codec import CorruptLineError, decode, encode
from .task_list import TaskList

logger = logging.getLogger(__name__)


@dataclass
class LoadIssue:
    """A persisted line that was skipped during load."""
    line_number: int
    line: str
    reason: str


@dataclass
class LoadResult:
    """Tasks recovered from disk plus any lines that could not be decoded."""
    tasks: TaskList
    issues: List[LoadIssue] = field(default_factory=list)


class Storage:
    """File-based storage for the task list."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> LoadResult:
        """Load every task from the data file.

        A missing file yields an empty list. Lines that fail to decode are
        skipped and reported in ``LoadResult.issues``; the remaining lines are
        still loaded.

        Raises:
            OSError: If the file exists but cannot be read
        """
        if not self.path.exists():
            logger.debug(f"No data file at {self.path}, starting with an empty list")
            return LoadResult(TaskList())

        # split on newlines only; str.splitlines would also break on
        # characters such as U+2028 that may appear inside a description
        with open(self.path, "r", encoding="utf-8") as f:
            lines = f.read().split("\n")

        tasks = TaskList()
        issues: List[LoadIssue] = []

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                tasks.add(decode(line))
            except CorruptLineError as e:
                logger.info(f"Skipping corrupt line {line_number} in {self.path}: {e}")
                issues.append(LoadIssue(line_number, line, str(e)))

        logger.debug(f"Loaded {tasks.size()} tasks from {self.path}")
        return LoadResult(tasks, issues)

    def save(self, tasks: TaskList) -> None:
        """Overwrite the data file with every task in current order.

        Raises:
            OSError: On any underlying write failure
        """
        content = "".join(f"{encode(task)}\n" for task in tasks)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(content)

        logger.debug(f"Saved {tasks.size()} tasks to {self.path}")
