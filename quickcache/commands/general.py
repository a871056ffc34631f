"""
Commands without arguments: list, clear, help and exit.
"""

import logging

from ..constants import (
    CLEAR_COMMAND_WORD,
    EXIT_COMMAND_WORD,
    HELP_COMMAND_WORD,
    LIST_COMMAND_WORD,
)
from ..flashcard_list import QuickCache
from ..model_manager import ModelManager
from ..predicates import PREDICATE_SHOW_ALL_FLASHCARDS
from .base import Command, CommandResult

logger = logging.getLogger(__name__)


class ListCommand(Command):
    COMMAND_WORD = LIST_COMMAND_WORD
    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all flashcards."
    MESSAGE_SUCCESS = "Listed all flashcards"

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_flashcard_list(PREDICATE_SHOW_ALL_FLASHCARDS)
        return CommandResult(self.MESSAGE_SUCCESS, show_list=True)


class ClearCommand(Command):
    COMMAND_WORD = CLEAR_COMMAND_WORD
    MESSAGE_USAGE = f"{COMMAND_WORD}: Deletes every flashcard."
    MESSAGE_SUCCESS = "QuickCache has been cleared!"

    def execute(self, model: ModelManager) -> CommandResult:
        model.quickcache = QuickCache()
        model.update_filtered_flashcard_list(PREDICATE_SHOW_ALL_FLASHCARDS)
        logger.info("Cleared all flashcards")
        return CommandResult(self.MESSAGE_SUCCESS)


class HelpCommand(Command):
    COMMAND_WORD = HELP_COMMAND_WORD
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Shows program usage instructions.\n"
        f"Example: {COMMAND_WORD}"
    )
    SHOWING_HELP_MESSAGE = "Opened help window."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)


class ExitCommand(Command):
    COMMAND_WORD = EXIT_COMMAND_WORD
    MESSAGE_USAGE = f"{COMMAND_WORD}: Exits the program."
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting QuickCache as requested ..."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)
