"""
Rendering of flashcards, statistics and command results with rich.
"""

from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..commands import (
    AddMultipleChoiceQuestionCommand,
    AddOpenEndedQuestionCommand,
    ClearCommand,
    ClearStatsCommand,
    CommandResult,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    ExportCommand,
    FindCommand,
    HelpCommand,
    ImportCommand,
    ListCommand,
    OpenCommand,
    StatsCommand,
    TestCommand,
)
from ..models import Flashcard, Statistics

HELP_COMMANDS = (
    AddOpenEndedQuestionCommand,
    AddMultipleChoiceQuestionCommand,
    OpenCommand,
    EditCommand,
    DeleteCommand,
    FindCommand,
    ListCommand,
    TestCommand,
    StatsCommand,
    ClearStatsCommand,
    ExportCommand,
    ImportCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
)


def _format_tags(flashcard: Flashcard) -> str:
    return " ".join(f"[{tag}]" for tag in sorted(flashcard.tags))


def display_flashcards(cons: Console, flashcards: Sequence[Flashcard]) -> None:
    """Print the displayed flashcard list, numbered from 1."""
    if not flashcards:
        cons.print("[yellow]No flashcards to display.[/yellow]")
        return

    table = Table(title="Flashcards")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Question", style="cyan")
    table.add_column("Type")
    table.add_column("Difficulty", style="magenta")
    table.add_column("Tags", style="green")

    for index, flashcard in enumerate(flashcards, start=1):
        table.add_row(
            str(index),
            escape(flashcard.question),
            "MCQ" if flashcard.is_multiple_choice else "Open",
            flashcard.difficulty.value,
            escape(_format_tags(flashcard)),
        )
    cons.print(table)


def display_flashcard(cons: Console, flashcard: Flashcard) -> None:
    """Show the question and choices of a flashcard, keeping the answer hidden."""
    lines = [escape(flashcard.question)]
    if flashcard.is_multiple_choice:
        lines.append("")
        lines.extend(
            f"{number}. {escape(choice)}"
            for number, choice in enumerate(flashcard.choices, start=1)
        )
    cons.print(
        Panel(
            "\n".join(lines),
            title=f"Question ({flashcard.difficulty.value})",
            border_style="green",
        )
    )


def display_statistics(cons: Console, statistics: Statistics) -> None:
    table = Table(title="Statistics", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("Times Tested", str(statistics.times_tested))
    table.add_row("Times Correct", str(statistics.times_tested_correct))
    table.add_row("Times Incorrect", str(statistics.times_tested_incorrect))
    table.add_row("Correct Rate", f"{statistics.correct_rate:.1f}%")
    cons.print(table)


def display_help(cons: Console, commands: Iterable = HELP_COMMANDS) -> None:
    """Print the usage of every command."""
    table = Table(title="Commands", show_lines=True)
    table.add_column("Command", style="cyan")
    table.add_column("Usage")
    for command in commands:
        table.add_row(command.COMMAND_WORD, escape(command.MESSAGE_USAGE))
    cons.print(table)


def display_error(cons: Console, message: str) -> None:
    cons.print(f"[bold red]{escape(message)}[/bold red]")


def display_result(
    cons: Console, result: CommandResult, flashcards: Sequence[Flashcard]
) -> None:
    """
    Render a command result.

    Parameters:
        cons (Console): Rich Console to print to.
        result (CommandResult): Result returned by the executed command.
        flashcards (Sequence[Flashcard]): The displayed flashcard list after
            the command ran, shown when the result asks for it.
    """
    feedback = escape(result.feedback_to_user)
    if result.is_correct is True:
        cons.print(f"[bold green]{feedback}[/bold green]")
    elif result.is_correct is False:
        cons.print(f"[bold red]{feedback}[/bold red]")
    else:
        cons.print(feedback)

    if result.show_flashcard and result.flashcard is not None:
        display_flashcard(cons, result.flashcard)
    if result.statistics is not None:
        display_statistics(cons, result.statistics)
    if result.show_list:
        display_flashcards(cons, flashcards)
    if result.show_help:
        display_help(cons)
