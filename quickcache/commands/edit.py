import logging
from dataclasses import dataclass, fields
from typing import FrozenSet, Optional, Tuple

from pydantic import ValidationError

from ..constants import EDIT_COMMAND_WORD
from ..exceptions import CommandError
from ..model_manager import ModelManager
from ..models import (
    Difficulty,
    Flashcard,
    first_error_message,
    resolve_choice_answer,
)
from ..predicates import PREDICATE_SHOW_ALL_FLASHCARDS
from .add import MESSAGE_DUPLICATE_FLASHCARD
from .base import Command, CommandResult, get_displayed_flashcard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditFlashcardDescriptor:
    """
    The fields to change on a flashcard. A field left as None keeps its
    current value; an empty ``tags`` set removes every tag.
    """

    question: Optional[str] = None
    answer: Optional[str] = None
    choices: Optional[Tuple[str, ...]] = None
    tags: Optional[FrozenSet[str]] = None
    difficulty: Optional[Difficulty] = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))


def create_edited_flashcard(
    flashcard: Flashcard, descriptor: EditFlashcardDescriptor
) -> Flashcard:
    """
    Build the flashcard that results from applying ``descriptor``.

    Giving choices to an open-ended flashcard turns it into a multiple-choice
    one. Statistics are carried over unchanged.

    Raises:
        CommandError: If the edited flashcard is invalid, e.g. its answer no
            longer matches any of its choices.
    """
    choices = (
        descriptor.choices
        if descriptor.choices is not None
        else flashcard.choices
    )
    answer = (
        resolve_choice_answer(descriptor.answer, choices)
        if descriptor.answer is not None
        else flashcard.answer
    )
    try:
        return Flashcard(
            question=(
                descriptor.question
                if descriptor.question is not None
                else flashcard.question
            ),
            answer=answer,
            choices=choices,
            tags=(
                descriptor.tags
                if descriptor.tags is not None
                else flashcard.tags
            ),
            difficulty=(
                descriptor.difficulty
                if descriptor.difficulty is not None
                else flashcard.difficulty
            ),
            statistics=flashcard.statistics,
        )
    except ValidationError as e:
        raise CommandError(first_error_message(e), original_exception=e) from e


class EditCommand(Command):
    COMMAND_WORD = EDIT_COMMAND_WORD
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Edits the flashcard identified by the index number "
        "used in the displayed flashcard list. Existing values will be "
        "overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [q/QUESTION] "
        "[a/ANSWER] [c/CHOICE]... [d/DIFFICULTY] [t/TAG]...\n"
        f"Example: {COMMAND_WORD} 1 q/What is 3+3? a/6"
    )
    MESSAGE_EDIT_FLASHCARD_SUCCESS = "Edited Flashcard: %s"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_FLASHCARD = MESSAGE_DUPLICATE_FLASHCARD

    def __init__(self, index: int, descriptor: EditFlashcardDescriptor):
        self.index = index
        self.descriptor = descriptor

    def execute(self, model: ModelManager) -> CommandResult:
        to_edit = get_displayed_flashcard(model, self.index)
        edited = create_edited_flashcard(to_edit, self.descriptor)

        if not to_edit.is_same_flashcard(edited) and model.has_flashcard(edited):
            raise CommandError(self.MESSAGE_DUPLICATE_FLASHCARD)

        model.set_flashcard(to_edit, edited)
        model.update_filtered_flashcard_list(PREDICATE_SHOW_ALL_FLASHCARDS)
        logger.info("Edited flashcard %d: %s", self.index, edited.question)
        return CommandResult(
            self.MESSAGE_EDIT_FLASHCARD_SUCCESS % edited, flashcard=edited
        )
