"""Tests for the command parser."""

import pytest
from datetime import date

from buddy.commands import (
    AddCommand,
    ByeCommand,
    DeleteCommand,
    ListCommand,
    MarkCommand,
    UnmarkCommand,
)
from buddy.parser import CommandParser, ParseError, parse_command
from buddy.task import TaskKind


class TestCommandParser:
    """Test dispatch of simple commands."""

    def setup_method(self):
        self.parser = CommandParser()

    def test_list(self):
        command, error = self.parser.parse("list")

        assert command == ListCommand()
        assert error is None

    def test_bye(self):
        command, error = self.parser.parse("bye")
        assert command == ByeCommand()

    def test_surrounding_whitespace_is_ignored(self):
        command, error = self.parser.parse("  list \n")
        assert command == ListCommand()

    @pytest.mark.parametrize("line,expected", [
        ("mark 2", MarkCommand(2)),
        ("unmark 1", UnmarkCommand(1)),
        ("delete 10", DeleteCommand(10)),
        ("mark   3", MarkCommand(3)),
    ])
    def test_index_commands(self, line, expected):
        command, error = self.parser.parse(line)

        assert command == expected
        assert error is None

    @pytest.mark.parametrize("line", ["mark two", "unmark -1", "delete 0", "mark 1 2", "delete 1.5"])
    def test_bad_task_number(self, line):
        command, error = self.parser.parse(line)

        assert command is None
        assert isinstance(error, ParseError)
        assert error.message == "Invalid task number!"

    @pytest.mark.parametrize("line", ["hello", "List", "list all", "byebye", "mark", "todos x", "blah todo x"])
    def test_unknown_command(self, line):
        command, error = self.parser.parse(line)

        assert command is None
        assert "don't know what that means" in error.message
        assert error.suggestions

    def test_blank_input(self):
        command, error = self.parser.parse("   ")

        assert command is None
        assert error.message == "Please enter a valid input!"


class TestAddParsing:
    """Test todo/deadline/event parsing."""

    def test_todo(self):
        command, error = parse_command("todo buy milk")

        assert isinstance(command, AddCommand)
        assert command.task.kind == TaskKind.TODO
        assert command.task.description == "buy milk"
        assert error is None

    @pytest.mark.parametrize("line", ["todo", "todo    "])
    def test_todo_without_description(self, line):
        command, error = parse_command(line)

        assert command is None
        assert "empty" in error.message

    def test_deadline(self):
        command, error = parse_command("deadline submit report /by 2024-12-01")

        assert command.task.kind == TaskKind.DEADLINE
        assert command.task.description == "submit report"
        assert command.task.due == date(2024, 12, 1)

    @pytest.mark.parametrize("line", [
        "deadline submit report",
        "deadline submit report /by",
        "deadline /by 2024-12-01",
        "deadline submit report by 2024-12-01",
    ])
    def test_deadline_missing_parts(self, line):
        command, error = parse_command(line)

        assert command is None
        assert error.message == "Please enter a valid deadline description!"

    def test_deadline_bad_date(self):
        command, error = parse_command("deadline submit report /by next friday")

        assert command is None
        assert error.message == "Invalid date 'next friday'"
        assert any("yyyy-mm-dd" in s for s in error.suggestions)

    def test_event(self):
        command, error = parse_command("event team sync /from 2024-01-01 /to 2024-01-02")

        assert command.task.kind == TaskKind.EVENT
        assert command.task.description == "team sync"
        assert command.task.start == date(2024, 1, 1)
        assert command.task.end == date(2024, 1, 2)

    def test_event_end_before_start_allowed(self):
        command, error = parse_command("event retro /from 2024-03-02 /to 2024-03-01")

        assert error is None
        assert command.task.end == date(2024, 3, 1)

    @pytest.mark.parametrize("line", [
        "event team sync /from 2024-01-01",
        "event team sync /to 2024-01-02",
        "event team sync",
        "event /from 2024-01-01 /to 2024-01-02",
        "event a /from 2024-01-01 /to 2024-01-02 /to 2024-01-03",
    ])
    def test_event_missing_parts(self, line):
        command, error = parse_command(line)

        assert command is None
        assert error.message == "Please enter a valid event description!"

    def test_event_bad_start_date(self):
        command, error = parse_command("event team sync /from Monday /to 2024-01-02")

        assert command is None
        assert error.message == "Invalid date 'Monday'"

    @pytest.mark.parametrize("line", [
        "todo a | b",
        "todo trailing |",
        "deadline a | b /by 2024-01-01",
    ])
    def test_descriptions_that_cannot_be_stored_are_rejected(self, line):
        command, error = parse_command(line)

        assert command is None
        assert "cannot contain" in error.message
