import logging

from ..constants import ADD_COMMAND_WORD, ADD_MCQ_COMMAND_WORD
from ..exceptions import CommandError
from ..model_manager import ModelManager
from ..models import Flashcard
from .base import Command, CommandResult

logger = logging.getLogger(__name__)

MESSAGE_SUCCESS = "New flashcard added: %s"
MESSAGE_DUPLICATE_FLASHCARD = "This flashcard already exists in the QuickCache"


class AddFlashcardCommand(Command):
    """Adds a flashcard to the QuickCache."""

    MESSAGE_SUCCESS = MESSAGE_SUCCESS
    MESSAGE_DUPLICATE_FLASHCARD = MESSAGE_DUPLICATE_FLASHCARD

    def __init__(self, to_add: Flashcard):
        if to_add is None:
            raise TypeError("Flashcard to add cannot be None")
        self.to_add = to_add

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_flashcard(self.to_add):
            raise CommandError(self.MESSAGE_DUPLICATE_FLASHCARD)

        model.add_flashcard(self.to_add)
        logger.info("Added flashcard: %s", self.to_add.question)
        return CommandResult(
            self.MESSAGE_SUCCESS % self.to_add, flashcard=self.to_add
        )


class AddOpenEndedQuestionCommand(AddFlashcardCommand):
    COMMAND_WORD = ADD_COMMAND_WORD
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds an open-ended question to the QuickCache. "
        "Parameters: q/QUESTION a/ANSWER [d/DIFFICULTY] [t/TAG]...\n"
        f"Example: {COMMAND_WORD} q/What is 2+2? a/4 d/LOW t/maths"
    )


class AddMultipleChoiceQuestionCommand(AddFlashcardCommand):
    COMMAND_WORD = ADD_MCQ_COMMAND_WORD
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Adds a multiple choice question to the QuickCache. "
        "Parameters: q/QUESTION a/ANSWER c/CHOICE [c/CHOICE]... "
        "[d/DIFFICULTY] [t/TAG]...\n"
        "ANSWER is the text or the number of the correct choice.\n"
        f"Example: {COMMAND_WORD} q/What is 2+2? a/2 c/3 c/4 c/5 t/maths"
    )
