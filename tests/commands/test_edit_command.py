import pytest

from quickcache.commands import EditCommand, EditFlashcardDescriptor
from quickcache.exceptions import CommandError
from quickcache.messages import (
    MESSAGE_ANSWER_NOT_IN_CHOICES,
    MESSAGE_INVALID_FLASHCARD_DISPLAYED_INDEX,
)
from quickcache.models import Difficulty, Flashcard, Statistics
from quickcache.predicates import FlashcardContainsTagPredicate


def test_descriptor_is_any_field_edited():
    assert not EditFlashcardDescriptor().is_any_field_edited()
    assert EditFlashcardDescriptor(tags=frozenset()).is_any_field_edited()


def test_edit_question_keeps_other_fields(model, tested_card):
    descriptor = EditFlashcardDescriptor(question="What is the cost of binary search?")
    result = EditCommand(3, descriptor).execute(model)

    edited = model.quickcache.flashcards[2]
    assert edited.question == "What is the cost of binary search?"
    assert edited.answer == tested_card.answer
    assert edited.tags == tested_card.tags
    assert edited.statistics == Statistics(times_tested=4, times_tested_correct=3)
    assert result.feedback_to_user == EditCommand.MESSAGE_EDIT_FLASHCARD_SUCCESS % edited


def test_edit_every_field(model):
    descriptor = EditFlashcardDescriptor(
        question="Q?",
        answer="A",
        tags=frozenset({"x"}),
        difficulty=Difficulty.HIGH,
    )
    EditCommand(1, descriptor).execute(model)
    assert model.quickcache.flashcards[0] == Flashcard(
        question="Q?", answer="A", tags={"x"}, difficulty=Difficulty.HIGH
    )


def test_empty_tags_clear_tags(model):
    EditCommand(1, EditFlashcardDescriptor(tags=frozenset())).execute(model)
    assert model.quickcache.flashcards[0].tags == frozenset()


def test_mcq_answer_by_number(model):
    EditCommand(2, EditFlashcardDescriptor(answer="3")).execute(model)
    assert model.quickcache.flashcards[1].answer == "Heap sort"


def test_mcq_answer_must_match_choice(model):
    with pytest.raises(CommandError) as excinfo:
        EditCommand(2, EditFlashcardDescriptor(answer="Bubble sort")).execute(model)
    assert str(excinfo.value) == MESSAGE_ANSWER_NOT_IN_CHOICES


def test_new_choices_must_contain_answer(model):
    with pytest.raises(CommandError) as excinfo:
        EditCommand(2, EditFlashcardDescriptor(choices=("x", "y"))).execute(model)
    assert str(excinfo.value) == MESSAGE_ANSWER_NOT_IN_CHOICES


def test_choices_turn_open_ended_into_mcq(model):
    descriptor = EditFlashcardDescriptor(
        answer="1", choices=("Object Oriented Programming", "Other")
    )
    EditCommand(1, descriptor).execute(model)
    edited = model.quickcache.flashcards[0]
    assert edited.is_multiple_choice
    assert edited.answer == "Object Oriented Programming"


def test_edit_into_duplicate_rejected(model, open_ended_card):
    descriptor = EditFlashcardDescriptor(
        question=open_ended_card.question, answer=open_ended_card.answer
    )
    with pytest.raises(CommandError) as excinfo:
        EditCommand(3, descriptor).execute(model)
    assert str(excinfo.value) == EditCommand.MESSAGE_DUPLICATE_FLASHCARD


def test_edit_tags_of_same_flashcard_is_not_a_duplicate(model):
    EditCommand(1, EditFlashcardDescriptor(tags=frozenset({"renamed"}))).execute(model)
    assert model.quickcache.flashcards[0].tags == frozenset({"renamed"})


def test_index_refers_to_filtered_list(model, tested_card):
    model.update_filtered_flashcard_list(FlashcardContainsTagPredicate(["algorithms"]))
    EditCommand(2, EditFlashcardDescriptor(difficulty=Difficulty.LOW)).execute(model)
    assert model.quickcache.flashcards[2].difficulty == Difficulty.LOW
    # the filter is reset after an edit
    assert len(model.filtered_flashcards) == 3


def test_invalid_index(model):
    model.update_filtered_flashcard_list(FlashcardContainsTagPredicate(["algorithms"]))
    with pytest.raises(CommandError) as excinfo:
        EditCommand(3, EditFlashcardDescriptor(question="Q")).execute(model)
    assert str(excinfo.value) == MESSAGE_INVALID_FLASHCARD_DISPLAYED_INDEX
