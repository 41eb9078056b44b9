"""Renders outcome events on a rich console."""

from typing import Optional

from rich.console import Console
from rich.text import Text

from .events import Event, EventKind
from .task import Task
from .theme import get_themed_console


class Presenter:
    """Event sink that prints a message for each event.

    Task text is always printed as plain ``Text`` so brackets such as
    ``[T][ ]`` are never read as console markup.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_themed_console()

    def __call__(self, event: Event) -> None:
        handler = getattr(self, f"_show_{event.kind.value}")
        handler(event)

    def _task_line(self, task: Task, prefix: str = "  ") -> Text:
        style = "todo_done" if task.done else "todo_pending"
        return Text(f"{prefix}{task.render()}", style=style)

    def _count_line(self, size: int) -> Text:
        noun = "task" if size == 1 else "tasks"
        return Text(f"Now you have {size} {noun} in the list.", style="muted")

    def _show_welcome(self, event: Event):
        self.console.print(Text("Hello! I'm Buddy", style="header"))
        self.console.print(Text("What can I do for you?"))

    def _show_farewell(self, event: Event):
        self.console.print(Text("Bye. Hope to see you again soon!", style="header"))

    def _show_task_added(self, event: Event):
        self.console.print(Text("Got it. I've added this task:", style="success"))
        self.console.print(self._task_line(event.task))
        self.console.print(self._count_line(event.size))

    def _show_task_marked(self, event: Event):
        self.console.print(Text("Nice! I've marked this task as done:", style="success"))
        self.console.print(self._task_line(event.task))

    def _show_task_unmarked(self, event: Event):
        self.console.print(Text("OK, I've marked this task as not done yet:", style="success"))
        self.console.print(self._task_line(event.task))

    def _show_task_removed(self, event: Event):
        self.console.print(Text("Noted. I've removed this task:", style="success"))
        self.console.print(self._task_line(event.task))
        self.console.print(self._count_line(event.size))

    def _show_task_list(self, event: Event):
        self.console.print(Text("Here are the tasks in your list:", style="header"))
        for position, task in event.entries:
            self.console.print(self._task_line(task, prefix=f"{position}."))

    def _show_empty_list(self, event: Event):
        self.console.print(Text("You have no tasks in your list!", style="muted"))

    def _show_invalid_task_number(self, event: Event):
        self.console.print(Text("Invalid task number!", style="error"))
        if event.size:
            self.console.print(Text(f"Pick a number between 1 and {event.size}.", style="muted"))

    def _show_input_error(self, event: Event):
        self.console.print(Text(event.message or "Please enter a valid command!", style="error"))
        for suggestion in event.suggestions:
            self.console.print(Text(f"  {suggestion}", style="muted"))

    def _show_save_failed(self, event: Event):
        self.console.print(Text("Failed to save tasks to file!", style="warning"))
        if event.message:
            self.console.print(Text(f"  {event.message}", style="muted"))

    def _show_load_failed(self, event: Event):
        self.console.print(Text("Failed to load tasks from file!", style="warning"))
        if event.message:
            self.console.print(Text(f"  {event.message}", style="muted"))
