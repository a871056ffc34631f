import logging

from ..constants import DELETE_COMMAND_WORD
from ..exceptions import CommandError
from ..model_manager import ModelManager
from ..predicates import FlashcardContainsTagPredicate
from .base import Command, CommandResult, get_displayed_flashcard

logger = logging.getLogger(__name__)

MESSAGE_USAGE = (
    f"{DELETE_COMMAND_WORD}: Deletes the flashcard identified by the index "
    "number used in the displayed flashcard list, or every flashcard that "
    "has all of the given tags.\n"
    "Parameters: INDEX (must be a positive integer) or t/TAG [t/TAG]...\n"
    f"Example: {DELETE_COMMAND_WORD} 1 or {DELETE_COMMAND_WORD} t/maths"
)


def _format_tags(predicate: FlashcardContainsTagPredicate) -> str:
    return "".join(f"[{tag}]" for tag in sorted(predicate.tags))


class DeleteCommand(Command):
    COMMAND_WORD = DELETE_COMMAND_WORD
    MESSAGE_USAGE = MESSAGE_USAGE
    MESSAGE_DELETE_FLASHCARD_SUCCESS = "Deleted Flashcard: %s"

    def __init__(self, index: int):
        self.index = index

    def execute(self, model: ModelManager) -> CommandResult:
        to_delete = get_displayed_flashcard(model, self.index)
        model.delete_flashcard(to_delete)
        logger.info("Deleted flashcard %d: %s", self.index, to_delete.question)
        return CommandResult(self.MESSAGE_DELETE_FLASHCARD_SUCCESS % to_delete)


class DeleteByTagCommand(Command):
    """Deletes every flashcard in the QuickCache carrying all given tags."""

    COMMAND_WORD = DELETE_COMMAND_WORD
    MESSAGE_USAGE = MESSAGE_USAGE
    MESSAGE_DELETE_BY_TAG_SUCCESS = "Deleted %d flashcard(s) with tags %s"
    MESSAGE_NO_FLASHCARD_WITH_TAGS = "No flashcards found with tags %s"

    def __init__(self, predicate: FlashcardContainsTagPredicate):
        self.predicate = predicate

    def execute(self, model: ModelManager) -> CommandResult:
        tags = _format_tags(self.predicate)
        to_delete = [f for f in model.quickcache if self.predicate(f)]
        if not to_delete:
            raise CommandError(self.MESSAGE_NO_FLASHCARD_WITH_TAGS % tags)

        for flashcard in to_delete:
            model.delete_flashcard(flashcard)
        logger.info("Deleted %d flashcard(s) with tags %s", len(to_delete), tags)
        return CommandResult(
            self.MESSAGE_DELETE_BY_TAG_SUCCESS % (len(to_delete), tags),
            show_list=True,
        )
