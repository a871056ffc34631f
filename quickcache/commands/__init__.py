"""Commands executed against the model."""

from .add import AddMultipleChoiceQuestionCommand, AddOpenEndedQuestionCommand
from .base import Command, CommandResult
from .delete import DeleteByTagCommand, DeleteCommand
from .edit import EditCommand, EditFlashcardDescriptor
from .find import FindCommand
from .general import ClearCommand, ExitCommand, HelpCommand, ListCommand
from .open import OpenCommand
from .quiz import TestCommand
from .stats import ClearStatsCommand, StatsCommand
from .transfer import ExportCommand, ImportCommand

__all__ = [
    "AddMultipleChoiceQuestionCommand",
    "AddOpenEndedQuestionCommand",
    "ClearCommand",
    "ClearStatsCommand",
    "Command",
    "CommandResult",
    "DeleteByTagCommand",
    "DeleteCommand",
    "EditCommand",
    "EditFlashcardDescriptor",
    "ExitCommand",
    "ExportCommand",
    "FindCommand",
    "HelpCommand",
    "ImportCommand",
    "ListCommand",
    "OpenCommand",
    "StatsCommand",
    "TestCommand",
]
