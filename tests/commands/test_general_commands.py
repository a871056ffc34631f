import pytest

from quickcache.commands import (
    ClearCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    OpenCommand,
)
from quickcache.exceptions import CommandError
from quickcache.messages import MESSAGE_INVALID_FLASHCARD_DISPLAYED_INDEX
from quickcache.models import Difficulty
from quickcache.predicates import (
    AllOfPredicate,
    DifficultyIsPredicate,
    FlashcardContainsTagPredicate,
    QuestionContainsKeywordsPredicate,
)


class TestFindCommand:
    def test_no_match(self, model):
        result = FindCommand(QuestionContainsKeywordsPredicate(["nothing"])).execute(model)
        assert result.feedback_to_user == "0 flashcards listed!"
        assert result.show_list
        assert model.filtered_flashcards == ()

    def test_keywords_match_any(self, model, open_ended_card, mcq_card):
        result = FindCommand(
            QuestionContainsKeywordsPredicate(["oop", "stable"])
        ).execute(model)
        assert result.feedback_to_user == "2 flashcards listed!"
        assert model.filtered_flashcards == (open_ended_card, mcq_card)

    def test_all_criteria_must_hold(self, model, mcq_card):
        predicate = AllOfPredicate([
            FlashcardContainsTagPredicate(["algorithms"]),
            DifficultyIsPredicate([Difficulty.MEDIUM]),
        ])
        FindCommand(predicate).execute(model)
        assert model.filtered_flashcards == (mcq_card,)


class TestListCommand:
    def test_resets_filter(self, model):
        model.update_filtered_flashcard_list(QuestionContainsKeywordsPredicate(["oop"]))
        result = ListCommand().execute(model)
        assert result.feedback_to_user == ListCommand.MESSAGE_SUCCESS
        assert result.show_list
        assert len(model.filtered_flashcards) == 3


class TestClearCommand:
    def test_clears_everything(self, model):
        result = ClearCommand().execute(model)
        assert result.feedback_to_user == "QuickCache has been cleared!"
        assert len(model.quickcache) == 0
        assert model.filtered_flashcards == ()

    def test_empty_quickcache(self, empty_model):
        ClearCommand().execute(empty_model)
        assert len(empty_model.quickcache) == 0


def test_help_command(model):
    result = HelpCommand().execute(model)
    assert result.show_help
    assert not result.exit
    assert result.feedback_to_user == HelpCommand.SHOWING_HELP_MESSAGE


def test_exit_command(model):
    result = ExitCommand().execute(model)
    assert result.exit
    assert not result.show_help
    assert result.feedback_to_user == ExitCommand.MESSAGE_EXIT_ACKNOWLEDGEMENT


class TestOpenCommand:
    def test_open(self, model, mcq_card):
        result = OpenCommand(2).execute(model)
        assert result.feedback_to_user == "Opened flashcard 2"
        assert result.flashcard == mcq_card
        assert result.show_flashcard

    def test_open_does_not_modify_model(self, model, quickcache):
        OpenCommand(1).execute(model)
        assert model.quickcache == quickcache

    def test_invalid_index(self, model):
        model.update_filtered_flashcard_list(QuestionContainsKeywordsPredicate(["oop"]))
        with pytest.raises(CommandError) as excinfo:
            OpenCommand(2).execute(model)
        assert str(excinfo.value) == MESSAGE_INVALID_FLASHCARD_DISPLAYED_INDEX
