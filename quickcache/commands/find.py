from ..constants import FIND_COMMAND_WORD
from ..messages import MESSAGE_FLASHCARDS_LISTED_OVERVIEW
from ..model_manager import ModelManager
from ..predicates import FlashcardPredicate
from .base import Command, CommandResult


class FindCommand(Command):
    """
    Finds and lists all flashcards matching every given criterion.
    Keyword matching is case insensitive.
    """

    COMMAND_WORD = FIND_COMMAND_WORD
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Finds all flashcards whose questions contain any of "
        "the keywords, that have all of the tags and any of the "
        "difficulties, and displays them as a list with index numbers.\n"
        "Parameters: [q/KEYWORD [MORE_KEYWORDS]...] [t/TAG]... "
        "[d/DIFFICULTY]... (at least one)\n"
        f"Example: {COMMAND_WORD} q/binary search t/algorithms"
    )

    def __init__(self, predicate: FlashcardPredicate):
        self.predicate = predicate

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_flashcard_list(self.predicate)
        return CommandResult(
            MESSAGE_FLASHCARDS_LISTED_OVERVIEW % len(model.filtered_flashcards),
            show_list=True,
        )
