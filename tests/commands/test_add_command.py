from unittest.mock import MagicMock

import pytest

from quickcache.commands import (
    AddMultipleChoiceQuestionCommand,
    AddOpenEndedQuestionCommand,
)
from quickcache.exceptions import CommandError
from quickcache.model_manager import ModelManager
from quickcache.models import Difficulty, Flashcard
from quickcache.predicates import DifficultyIsPredicate


def test_constructor_rejects_none():
    with pytest.raises(TypeError):
        AddOpenEndedQuestionCommand(None)  # type: ignore


def test_add_calls_model():
    model = MagicMock(spec=ModelManager)
    model.has_flashcard.return_value = False
    flashcard = Flashcard(question="Q", answer="A")

    result = AddOpenEndedQuestionCommand(flashcard).execute(model)

    model.add_flashcard.assert_called_once_with(flashcard)
    assert result.feedback_to_user == AddOpenEndedQuestionCommand.MESSAGE_SUCCESS % flashcard
    assert result.flashcard == flashcard


def test_add_open_ended(model):
    flashcard = Flashcard(question="New question?", answer="Yes", tags={"new"})
    model.update_filtered_flashcard_list(DifficultyIsPredicate([Difficulty.HIGH]))

    result = AddOpenEndedQuestionCommand(flashcard).execute(model)

    assert result.feedback_to_user == (
        "New flashcard added: Question: New question?; Answer: Yes; "
        "Difficulty: UNSPECIFIED; Tags: [new]"
    )
    assert model.quickcache.flashcards[-1] == flashcard
    assert model.filtered_flashcards[-1] == flashcard


def test_add_multiple_choice(empty_model):
    flashcard = Flashcard(question="Pick one", answer="b", choices=("a", "b"))
    AddMultipleChoiceQuestionCommand(flashcard).execute(empty_model)
    assert empty_model.quickcache.flashcards == (flashcard,)


def test_add_duplicate_rejected(model, open_ended_card):
    duplicate = open_ended_card.model_copy(update={"difficulty": Difficulty.HIGH})
    with pytest.raises(CommandError) as excinfo:
        AddOpenEndedQuestionCommand(duplicate).execute(model)
    assert str(excinfo.value) == AddOpenEndedQuestionCommand.MESSAGE_DUPLICATE_FLASHCARD
    assert len(model.quickcache) == 3


def test_equality(open_ended_card, mcq_card):
    command = AddOpenEndedQuestionCommand(open_ended_card)
    assert command == AddOpenEndedQuestionCommand(open_ended_card)
    assert command != AddOpenEndedQuestionCommand(mcq_card)
    assert command != AddMultipleChoiceQuestionCommand(open_ended_card)
    assert command != 1
