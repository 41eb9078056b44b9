"""Tests for the persisted line format."""

import pytest
from datetime import date

from buddy.codec import (
    CorruptLineError,
    TaskLineFormat,
    UnrecognizedTaskTypeError,
    decode,
    encode,
    is_encodable_description,
)
from buddy.task import Task, TaskKind


class TestEncode:
    """Tests for turning tasks into lines."""

    def test_encode_todo(self):
        assert encode(Task.todo("read book")) == "T | 0 | read book"

    def test_encode_done_deadline(self):
        task = Task.deadline("return book", "2019-10-15")
        task.mark_done()

        assert encode(task) == "D | 1 | return book | 2019-10-15"

    def test_encode_event(self):
        task = Task.event("project meeting", "2019-08-06", "2019-08-07")

        assert encode(task) == "E | 0 | project meeting | 2019-08-06 2019-08-07"

    def test_encode_rejects_separator_in_description(self):
        with pytest.raises(ValueError):
            encode(Task.todo("a | b"))


class TestDecode:
    """Tests for turning lines back into tasks."""

    def test_decode_todo(self):
        task = decode("T | 1 | read book")

        assert task.kind == TaskKind.TODO
        assert task.done is True
        assert task.description == "read book"

    def test_decode_deadline(self):
        task = decode("D | 0 | return book | 2019-10-15")

        assert task.kind == TaskKind.DEADLINE
        assert task.done is False
        assert task.due == date(2019, 10, 15)

    def test_decode_event(self):
        task = decode("E | 0 | project meeting | 2019-08-06 2019-08-07\n")

        assert task.start == date(2019, 8, 6)
        assert task.end == date(2019, 8, 7)

    def test_unknown_tag_raises_unrecognized_task_type(self):
        with pytest.raises(UnrecognizedTaskTypeError) as exc_info:
            decode("X | 0 | mystery")

        assert exc_info.value.tag == "X"
        assert isinstance(exc_info.value, CorruptLineError)

    @pytest.mark.parametrize("line", [
        "T | 0",
        "T | 0 | read | extra",
        "D | 0 | return book",
        "T | 2 | read book",
        "T | 0 | ",
        "D | 0 | return book | 15/10/2019",
        "E | 0 | meeting | 2019-08-06",
        "E | 0 | meeting | 2019-08-06  2019-08-07",
        "T | 0 | abc |",
        "T | 1 | line\rbreak",
    ])
    def test_malformed_lines_raise_corrupt_line_error(self, line):
        with pytest.raises(CorruptLineError) as exc_info:
            decode(line)

        assert exc_info.value.line == line


class TestRoundTrip:
    """decode(encode(t)) reproduces t."""

    @pytest.mark.parametrize("task", [
        Task.todo("read book"),
        Task.todo("| leading pipe"),
        Task.deadline("a/b c", "2024-02-29"),
        Task.event("offsite", "2024-06-10", "2024-06-01"),
        Task(TaskKind.TODO, "done already", done=True),
    ])
    def test_round_trip(self, task):
        assert decode(encode(task)) == task

    def test_round_trip_keeps_done_flag(self):
        task = Task.event("team sync", "2024-01-01", "2024-01-02")
        task.mark_done()

        restored = TaskLineFormat.from_line(TaskLineFormat.to_line(task))

        assert restored.done is True
        assert restored == task


class TestEncodableDescription:

    @pytest.mark.parametrize("text,expected", [
        ("plain", True),
        ("a|b", True),
        ("a | b", False),
        ("ends with |", False),
        ("two\nlines", False),
    ])
    def test_is_encodable_description(self, text, expected):
        assert is_encodable_description(text) is expected
