"""Task data model for Buddy."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union

from .utils.datetime import DATE_FORMAT, format_task_date, parse_task_date


DateInput = Union[str, date]


class TaskKind(Enum):
    """Task variants. The value is the tag character used on disk and on screen."""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def tag(self) -> str:
        return self.value


class DateFormatError(ValueError):
    """Raised when a date string does not match the task date format."""

    def __init__(self, field_name: str, value: str):
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Invalid {field_name} date '{value}', expected format {DATE_FORMAT}"
        )


def _coerce_date(value: DateInput, field_name: str) -> date:
    if isinstance(value, date):
        return value
    parsed = parse_task_date(value)
    if parsed is None:
        raise DateFormatError(field_name, value)
    return parsed


@dataclass
class Task:
    """A tracked unit of work.

    ``kind`` and ``description`` are set once at construction. Only ``done``
    changes afterwards, through ``mark_done`` and ``mark_not_done``. A task
    has no identity of its own; it is addressed by its position in a
    ``TaskList``.
    """

    kind: TaskKind
    description: str
    done: bool = False
    due: Optional[date] = None
    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self):
        if not self.description or not self.description.strip():
            raise ValueError("Task description cannot be empty")

        if self.kind is TaskKind.DEADLINE:
            if self.due is None:
                raise ValueError("Deadline requires a due date")
            if self.start is not None or self.end is not None:
                raise ValueError("Deadline cannot have start/end dates")
        elif self.kind is TaskKind.EVENT:
            # end may precede start; no ordering is enforced
            if self.start is None or self.end is None:
                raise ValueError("Event requires start and end dates")
            if self.due is not None:
                raise ValueError("Event cannot have a due date")
        elif self.due is not None or self.start is not None or self.end is not None:
            raise ValueError("Todo cannot have dates")

    @classmethod
    def todo(cls, description: str) -> "Task":
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, due: DateInput) -> "Task":
        """Create a deadline; string dates are parsed, raising DateFormatError."""
        return cls(TaskKind.DEADLINE, description, due=_coerce_date(due, "due"))

    @classmethod
    def event(cls, description: str, start: DateInput, end: DateInput) -> "Task":
        """Create an event; string dates are parsed, raising DateFormatError."""
        return cls(
            TaskKind.EVENT,
            description,
            start=_coerce_date(start, "start"),
            end=_coerce_date(end, "end"),
        )

    def mark_done(self):
        """Mark the task as done."""
        self.done = True

    def mark_not_done(self):
        """Mark the task as not done."""
        self.done = False

    def status_icon(self) -> str:
        return "X" if self.done else " "

    def render(self) -> str:
        """Human-readable line, e.g. ``[D][X] submit report (by: 2024-12-01)``."""
        line = f"[{self.kind.tag}][{self.status_icon()}] {self.description}"
        if self.kind is TaskKind.DEADLINE:
            line += f" (by: {format_task_date(self.due)})"
        elif self.kind is TaskKind.EVENT:
            line += f" (from: {format_task_date(self.start)} to: {format_task_date(self.end)})"
        return line

    def __str__(self) -> str:
        return self.render()
