"""
CLI entry point for QuickCache.
"""

# Standard library imports
import logging
from pathlib import Path
from typing import Optional

# Third-party imports
import typer
from rich.console import Console
from rich.logging import RichHandler

# Local application imports
from quickcache.cli.display import display_error, display_result
from quickcache.constants import DATA_ENVVAR, DEFAULT_PREFS_FILE, PREFS_ENVVAR
from quickcache.exceptions import CommandError, ParseError
from quickcache.logic import LogicManager, init_model, init_prefs
from quickcache.storage import (
    JsonQuickCacheStorage,
    JsonUserPrefsStorage,
    StorageManager,
)

logger = logging.getLogger(__name__)

console = Console()

app = typer.Typer(
    name="quickcache",
    help="QuickCache: flashcards for the command line.",
    add_completion=False,
    rich_markup_mode="markdown",
)

WELCOME_MESSAGE = (
    "Welcome to QuickCache! Type [bold]help[/bold] to see the available "
    "commands or [bold]exit[/bold] to quit."
)
PROMPT = "[bold cyan]quickcache>[/bold cyan] "


# ---------------------------------------------------------------------------
# Start-up
# ---------------------------------------------------------------------------


_prefs_option = typer.Option(  # noqa: B008
    DEFAULT_PREFS_FILE,
    "--prefs",
    help="Path to the user preferences JSON file. "
    "Falls back to QUICKCACHE_PREFS env var.",
    envvar=PREFS_ENVVAR,
)

_data_option = typer.Option(  # noqa: B008
    None,
    "--data",
    help="Path to the QuickCache JSON data file. Overrides the path stored "
    "in the preferences. Falls back to QUICKCACHE_DATA env var.",
    envvar=DATA_ENVVAR,
)

_log_level_option = typer.Option(  # noqa: B008
    "WARNING",
    "--log-level",
    help="Logging level (DEBUG, INFO, WARNING, ERROR).",
)


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        console.print(
            f"[bold red]Error: unknown log level '{level_name}'.[/bold red]"
        )
        raise typer.Exit(code=1)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def _build_logic(prefs_file: Path, data_file: Optional[Path]) -> LogicManager:
    """
    Load the preferences and the QuickCache and wire them into a LogicManager.

    Parameters:
        prefs_file (Path): Location of the preferences file.
        data_file (Optional[Path]): Data file to use instead of the one named
            in the preferences.
    """
    prefs_storage = JsonUserPrefsStorage(prefs_file)
    user_prefs = init_prefs(prefs_storage)
    if data_file is not None:
        user_prefs.quickcache_file_path = data_file

    storage = StorageManager(
        JsonQuickCacheStorage(user_prefs.quickcache_file_path), prefs_storage
    )
    model = init_model(storage, user_prefs)
    logger.info("Starting QuickCache with data file %s", storage.quickcache_file_path)
    return LogicManager(model, storage)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    prefs: Path = _prefs_option,
    data: Optional[Path] = _data_option,
    log_level: str = _log_level_option,
):
    """
    Manage flashcards interactively. Without a command, starts the
    interactive session.
    """
    _configure_logging(log_level)
    ctx.obj = _build_logic(prefs, data)
    if ctx.invoked_subcommand is None:
        _run_session(ctx.obj)


# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------


def _execute(logic: LogicManager, command_text: str) -> Optional[bool]:
    """
    Execute one line of input and render the outcome.

    Returns:
        Optional[bool]: None if the command failed, otherwise whether the
        command asked the session to end.
    """
    try:
        result = logic.execute(command_text)
    except (ParseError, CommandError) as e:
        logger.info("Invalid command: %s", e)
        display_error(console, str(e))
        return None
    display_result(console, result, logic.filtered_flashcards)
    return result.exit


def _run_session(logic: LogicManager) -> None:
    """Read commands until ``exit`` or end of input."""
    console.print(WELCOME_MESSAGE)
    while True:
        try:
            command_text = console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not command_text.strip():
            continue
        if _execute(logic, command_text):
            break
    logger.info("QuickCache session ended")


@app.command()
def run(ctx: typer.Context):
    """
    Start an interactive session. Type `help` inside the session for the
    list of commands.
    """
    _run_session(ctx.obj)


@app.command("exec")
def exec_command(
    ctx: typer.Context,
    command_text: str = typer.Argument(  # noqa: B008
        ..., help='A single QuickCache command, e.g. "list" or "open 1".'
    ),
):
    """
    Execute a single command and exit. Exits with code 1 if the command is
    invalid or fails.
    """
    if _execute(ctx.obj, command_text) is None:
        raise typer.Exit(code=1)


def main():
    app()


if __name__ == "__main__":
    main()
