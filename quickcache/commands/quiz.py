import logging
from typing import Optional

from ..constants import TEST_COMMAND_WORD
from ..exceptions import CommandError
from ..messages import MESSAGE_INVALID_OPTION
from ..model_manager import ModelManager
from .base import Command, CommandResult, get_displayed_flashcard

logger = logging.getLogger(__name__)


class TestCommand(Command):
    """
    Tests the user on a flashcard and records the outcome in its statistics.

    Open-ended flashcards are answered with text, multiple-choice ones with
    the number of a choice.
    """

    # Keeps pytest from collecting this class as a test case.
    __test__ = False

    COMMAND_WORD = TEST_COMMAND_WORD
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Tests the user on the flashcard identified by the "
        "index number used in the displayed flashcard list.\n"
        "Parameters: INDEX (must be a positive integer) a/ANSWER for "
        "open-ended questions, or INDEX o/OPTION for multiple choice "
        "questions\n"
        f"Example: {COMMAND_WORD} 1 a/4 or {COMMAND_WORD} 2 o/3"
    )
    MESSAGE_CORRECT = "Correct! The answer is: %s"
    MESSAGE_WRONG = "Wrong! The correct answer is: %s"
    MESSAGE_USE_OPTION = (
        "This flashcard is a multiple choice question; "
        "answer it with o/OPTION"
    )
    MESSAGE_USE_ANSWER = (
        "This flashcard is an open-ended question; answer it with a/ANSWER"
    )

    def __init__(
        self,
        index: int,
        answer: Optional[str] = None,
        option: Optional[int] = None,
    ):
        if (answer is None) == (option is None):
            raise ValueError("Exactly one of answer and option must be given")
        self.index = index
        self.answer = answer
        self.option = option

    def _check(self, flashcard) -> bool:
        if self.option is not None:
            if not flashcard.is_multiple_choice:
                raise CommandError(self.MESSAGE_USE_ANSWER)
            if flashcard.choice_at(self.option) is None:
                raise CommandError(MESSAGE_INVALID_OPTION)
            return flashcard.is_correct_option(self.option)

        if flashcard.is_multiple_choice:
            raise CommandError(self.MESSAGE_USE_OPTION)
        return flashcard.is_correct_answer(self.answer)

    def execute(self, model: ModelManager) -> CommandResult:
        flashcard = get_displayed_flashcard(model, self.index)
        is_correct = self._check(flashcard)

        tested = flashcard.with_statistics(
            flashcard.statistics.record(is_correct)
        )
        model.set_flashcard(flashcard, tested)
        logger.info(
            "Tested flashcard %d (%s): %s",
            self.index,
            flashcard.question,
            "correct" if is_correct else "wrong",
        )

        template = self.MESSAGE_CORRECT if is_correct else self.MESSAGE_WRONG
        return CommandResult(
            template % tested.answer,
            flashcard=tested,
            statistics=tested.statistics,
            is_correct=is_correct,
        )
