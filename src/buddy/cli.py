"""Command-line interface for Buddy."""

import logging
from pathlib import Path
from typing import IO, Iterable, Iterator

import click
from rich.console import Console

from .commands import execute
from .config import load_config
from .events import Event, EventKind
from .logging_setup import setup_logging
from .parser import CommandParser
from .state import AppState, create_initial_state
from .theme import get_themed_console, show_startup_banner
from .ui import Presenter

logger = logging.getLogger(__name__)


def process_lines(state: AppState, lines: Iterable[str], parser: CommandParser) -> bool:
    """Parse and execute each line until ``bye``.

    Returns:
        False if the session was ended by ``bye``, True if input ran out
    """
    for line in lines:
        if not line.strip():
            state.emit(Event(EventKind.INPUT_ERROR, message="Please enter a valid input!"))
            continue

        command, error = parser.parse(line)
        if error:
            logger.debug(f"Rejected input {line!r}: {error.message}")
            state.emit(Event(EventKind.INPUT_ERROR, message=error.message, suggestions=error.suggestions))
            continue

        if not execute(command, state):
            return False

    return True


def _read_lines(stream: IO[str], console: Console) -> Iterator[str]:
    interactive = stream.isatty()
    while True:
        if interactive:
            console.print("> ", end="", style="primary")
        line = stream.readline()
        if not line:
            return
        yield line.rstrip("\r\n")


@click.group(invoke_without_command=True)
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--data-file", type=click.Path(dir_okay=False), help="Task data file (overrides config)")
@click.option("--no-banner", is_flag=True, help="Skip the welcome banner")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config_path, data_file, no_banner, verbose):
    """Buddy - a small task tracker you talk to.

    Run without a subcommand to start an interactive session.
    """
    ctx.ensure_object(dict)

    config = load_config(Path(config_path) if config_path else None)
    if data_file:
        config.data_file = str(Path(data_file).expanduser())
    if no_banner:
        config.show_banner = False

    console_level = logging.DEBUG if verbose else logging.getLevelName(config.log_level)
    setup_logging(config.get_log_dir(), console_level=console_level)
    logger.debug(f"Using data file {config.data_file}")

    console = get_themed_console(no_color=config.no_color)
    ctx.obj['config'] = config
    ctx.obj['console'] = console

    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.pass_context
def chat(ctx):
    """Start an interactive session (the default)."""
    config = ctx.obj['config']
    console = ctx.obj['console']
    presenter = Presenter(console)

    if config.show_banner:
        show_startup_banner(console)
    presenter(Event(EventKind.WELCOME))

    state = create_initial_state(config, presenter)
    parser = CommandParser()
    stream = click.get_text_stream("stdin")

    try:
        ended_by_bye = not process_lines(state, _read_lines(stream, console), parser)
    except KeyboardInterrupt:
        console.print()
        ended_by_bye = False

    if not ended_by_bye:
        presenter(Event(EventKind.FAREWELL))


@main.command()
@click.argument("lines", nargs=-1, required=True)
@click.pass_context
def run(ctx, lines):
    """Execute each LINE as a command, then exit.

    \b
    Example:
        buddy run "todo buy milk" "deadline report /by 2024-12-01" list
    """
    presenter = Presenter(ctx.obj['console'])
    state = create_initial_state(ctx.obj['config'], presenter)
    process_lines(state, lines, CommandParser())


@main.command("config-show")
@click.pass_context
def config_show(ctx):
    """Print the effective configuration."""
    click.echo(ctx.obj['config'].to_yaml(), nl=False)


if __name__ == "__main__":
    main()
