"""Parser turning one line of user input into a command."""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .codec import is_encodable_description
from .commands import (
    AddCommand,
    ByeCommand,
    Command,
    DeleteCommand,
    ListCommand,
    MarkCommand,
    UnmarkCommand,
)
from .task import Task
from .utils.datetime import parse_task_date


ADD_KEYWORDS = ("todo", "deadline", "event")

DEADLINE_SEPARATOR = " /by "
EVENT_SEPARATORS = re.compile(r" /from | /to ")
TASK_NUMBER_RE = re.compile(r"^[0-9]+$")

DATE_HINT = "Dates use the format yyyy-mm-dd, e.g. 2024-12-01"


@dataclass
class ParseError:
    """Represents a parsing error with suggestions."""
    message: str
    suggestions: List[str] = field(default_factory=list)


ParseResult = Tuple[Optional[Command], Optional[ParseError]]


def _ok(command: Command) -> ParseResult:
    return command, None


def _fail(message: str, *suggestions: str) -> ParseResult:
    return None, ParseError(message, list(suggestions))


def _parse_task_number(text: str) -> Optional[int]:
    text = text.strip()
    if not TASK_NUMBER_RE.match(text):
        return None
    number = int(text)
    return number if number > 0 else None


def _check_description(description: str, usage: str) -> Optional[ParseError]:
    if not description:
        return ParseError("The description cannot be empty", [usage])
    if not is_encodable_description(description):
        return ParseError(
            "The description cannot contain ' | ' or end with ' |'",
            [usage],
        )
    return None


class CommandParser:
    """Parses command lines into command values.

    Parsing never raises for bad input: every call returns either a command
    or a ``ParseError``.
    """

    INDEX_COMMANDS = (
        ("mark ", MarkCommand),
        ("unmark ", UnmarkCommand),
        ("delete ", DeleteCommand),
    )

    def parse(self, line: str) -> ParseResult:
        """Parse one line of input."""
        line = line.strip()

        if not line:
            return _fail("Please enter a valid input!")

        if line == "list":
            return _ok(ListCommand())

        if line == "bye":
            return _ok(ByeCommand())

        for prefix, command_cls in self.INDEX_COMMANDS:
            if line.startswith(prefix):
                number = _parse_task_number(line[len(prefix):])
                if number is None:
                    return _fail(
                        "Invalid task number!",
                        f"Use: {prefix}<n>, where <n> is a task number from 'list'",
                    )
                return _ok(command_cls(number))

        keyword, _, rest = line.partition(" ")
        if keyword in ADD_KEYWORDS:
            return self._parse_add(keyword, rest.strip())

        return _fail(
            "OOPS!!! I'm sorry, but I don't know what that means :-(",
            "Commands: list, todo, deadline, event, mark, unmark, delete, bye",
        )

    def _parse_add(self, keyword: str, rest: str) -> ParseResult:
        if keyword == "todo":
            return self._parse_todo(rest)
        if keyword == "deadline":
            return self._parse_deadline(rest)
        return self._parse_event(rest)

    def _parse_todo(self, rest: str) -> ParseResult:
        usage = "Use: todo <description>"
        error = _check_description(rest, usage)
        if error:
            return None, error
        return _ok(AddCommand(Task.todo(rest)))

    def _parse_deadline(self, rest: str) -> ParseResult:
        usage = "Use: deadline <description> /by <date>"
        description, found, due_text = rest.partition(DEADLINE_SEPARATOR)
        description = description.strip()
        due_text = due_text.strip()

        if not found or not description or not due_text:
            return _fail("Please enter a valid deadline description!", usage)

        error = _check_description(description, usage)
        if error:
            return None, error

        due = parse_task_date(due_text)
        if due is None:
            return _fail(f"Invalid date '{due_text}'", DATE_HINT)

        return _ok(AddCommand(Task.deadline(description, due)))

    def _parse_event(self, rest: str) -> ParseResult:
        usage = "Use: event <description> /from <start> /to <end>"
        parts = [part.strip() for part in EVENT_SEPARATORS.split(rest)]

        if len(parts) != 3 or not all(parts):
            return _fail("Please enter a valid event description!", usage)

        description, start_text, end_text = parts

        error = _check_description(description, usage)
        if error:
            return None, error

        start = parse_task_date(start_text)
        if start is None:
            return _fail(f"Invalid date '{start_text}'", DATE_HINT)
        end = parse_task_date(end_text)
        if end is None:
            return _fail(f"Invalid date '{end_text}'", DATE_HINT)

        return _ok(AddCommand(Task.event(description, start, end)))


def parse_command(line: str) -> ParseResult:
    """Parse one line of input into ``(command, error)``."""
    return CommandParser().parse(line)
