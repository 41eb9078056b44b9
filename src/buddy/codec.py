"""Line format for persisted tasks.

Each task is stored as one line::

    T | 0 | read book
    D | 1 | submit report | 2024-12-01
    E | 0 | team sync | 2024-01-01 2024-01-02

Fields are separated by the literal ``" | "``. The first field is the task
tag, the second the done flag, the third the description. Deadlines carry
the due date in a fourth field; events carry ``<start> <end>`` there.
"""

from typing import List

from .task import Task, TaskKind
from .utils.datetime import format_task_date


FIELD_SEPARATOR = " | "
DONE_FLAGS = {"1": True, "0": False}

_TAGS = {kind.tag: kind for kind in TaskKind}
_FIELD_COUNTS = {TaskKind.TODO: 3, TaskKind.DEADLINE: 4, TaskKind.EVENT: 4}


class CorruptLineError(ValueError):
    """Raised when a persisted line cannot be turned back into a task."""

    def __init__(self, message: str, line: str):
        self.line = line
        super().__init__(message)


class UnrecognizedTaskTypeError(CorruptLineError):
    """Raised when a persisted line starts with an unknown task tag."""

    def __init__(self, tag: str, line: str):
        self.tag = tag
        super().__init__(f"Unknown task type: {tag}", line)


def is_encodable_description(description: str) -> bool:
    """Check that a description survives a round trip through the line format.

    The separator may not appear inside it, and a trailing ``" |"`` would merge
    with the following separator of a deadline or event.
    """
    return (
        FIELD_SEPARATOR not in description
        and not description.endswith(FIELD_SEPARATOR.rstrip())
        and "\n" not in description
        and "\r" not in description
    )


class TaskLineFormat:
    """Handles conversion between Task objects and persisted lines."""

    @staticmethod
    def to_line(task: Task) -> str:
        """Convert a task to its persisted line."""
        if not is_encodable_description(task.description):
            raise ValueError(
                f"Description cannot be stored in the task file: {task.description!r}"
            )

        fields: List[str] = [task.kind.tag, "1" if task.done else "0", task.description]

        if task.kind is TaskKind.DEADLINE:
            fields.append(format_task_date(task.due))
        elif task.kind is TaskKind.EVENT:
            fields.append(f"{format_task_date(task.start)} {format_task_date(task.end)}")

        return FIELD_SEPARATOR.join(fields)

    @staticmethod
    def from_line(line: str) -> Task:
        """Parse a persisted line back to a Task."""
        line = line.rstrip("\r\n")
        fields = line.split(FIELD_SEPARATOR)

        kind = _TAGS.get(fields[0])
        if kind is None:
            raise UnrecognizedTaskTypeError(fields[0], line)

        expected = _FIELD_COUNTS[kind]
        if len(fields) != expected:
            raise CorruptLineError(
                f"Expected {expected} fields for {kind.name.lower()}, got {len(fields)}",
                line,
            )

        done = DONE_FLAGS.get(fields[1])
        if done is None:
            raise CorruptLineError(f"Invalid done flag: {fields[1]!r}", line)

        description = fields[2]
        if not is_encodable_description(description):
            raise CorruptLineError(f"Description cannot be stored: {description!r}", line)

        if kind is TaskKind.EVENT:
            dates = fields[3].split(" ")
            if len(dates) != 2:
                raise CorruptLineError(
                    f"Expected '<start> <end>' for event, got {fields[3]!r}", line
                )

        try:
            if kind is TaskKind.TODO:
                task = Task.todo(description)
            elif kind is TaskKind.DEADLINE:
                task = Task.deadline(description, fields[3])
            else:
                task = Task.event(description, dates[0], dates[1])
        except ValueError as e:
            # DateFormatError and empty descriptions both land here
            raise CorruptLineError(str(e), line) from e

        if done:
            task.mark_done()

        return task


def encode(task: Task) -> str:
    """Encode a task as one persisted line."""
    return TaskLineFormat.to_line(task)


def decode(line: str) -> Task:
    """Decode one persisted line into a task."""
    return TaskLineFormat.from_line(line)
