"""
Filters applied to the displayed flashcard list.
"""

from typing import Iterable, Tuple

from .models import Difficulty, Flashcard


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """
    Return True if ``sentence`` contains ``word`` as a whole word.

    Matching is case-insensitive and ignores surrounding punctuation such as
    a trailing question mark. ``word`` must be a single non-blank word.
    """
    prepared_word = word.strip()
    if not prepared_word:
        raise ValueError("Word parameter cannot be empty")
    if len(prepared_word.split()) != 1:
        raise ValueError("Word parameter should be a single word")

    target = prepared_word.casefold()
    for candidate in sentence.split():
        if candidate.casefold() == target:
            return True
        if candidate.strip(".,;:!?\"'()").casefold() == target:
            return True
    return False


class FlashcardPredicate:
    """Base class for equality-comparable flashcard filters."""

    def __call__(self, flashcard: Flashcard) -> bool:
        raise NotImplementedError

    def _key(self) -> Tuple:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class QuestionContainsKeywordsPredicate(FlashcardPredicate):
    """Matches a flashcard whose question contains any of the keywords."""

    def __init__(self, keywords: Iterable[str]):
        self.keywords: Tuple[str, ...] = tuple(keywords)

    def __call__(self, flashcard: Flashcard) -> bool:
        return any(
            contains_word_ignore_case(flashcard.question, keyword)
            for keyword in self.keywords
        )

    def _key(self) -> Tuple:
        return self.keywords

    def __repr__(self) -> str:
        return f"QuestionContainsKeywordsPredicate({list(self.keywords)!r})"


class FlashcardContainsTagPredicate(FlashcardPredicate):
    """Matches a flashcard carrying every one of the tags."""

    def __init__(self, tags: Iterable[str]):
        self.tags = frozenset(tags)

    def __call__(self, flashcard: Flashcard) -> bool:
        return flashcard.has_tags(self.tags)

    def _key(self) -> Tuple:
        return (self.tags,)

    def __repr__(self) -> str:
        return f"FlashcardContainsTagPredicate({sorted(self.tags)!r})"


class DifficultyIsPredicate(FlashcardPredicate):
    """Matches a flashcard with any of the given difficulties."""

    def __init__(self, difficulties: Iterable[Difficulty]):
        self.difficulties = frozenset(difficulties)

    def __call__(self, flashcard: Flashcard) -> bool:
        return flashcard.difficulty in self.difficulties

    def _key(self) -> Tuple:
        return (self.difficulties,)

    def __repr__(self) -> str:
        levels = sorted(d.value for d in self.difficulties)
        return f"DifficultyIsPredicate({levels!r})"


class AllOfPredicate(FlashcardPredicate):
    """Conjunction of several predicates; matches everything when empty."""

    def __init__(self, predicates: Iterable[FlashcardPredicate]):
        self.predicates: Tuple[FlashcardPredicate, ...] = tuple(predicates)

    def __call__(self, flashcard: Flashcard) -> bool:
        return all(predicate(flashcard) for predicate in self.predicates)

    def _key(self) -> Tuple:
        return self.predicates

    def __repr__(self) -> str:
        return f"AllOfPredicate({list(self.predicates)!r})"


class ShowAllPredicate(FlashcardPredicate):
    def __call__(self, flashcard: Flashcard) -> bool:
        return True

    def _key(self) -> Tuple:
        return ()

    def __repr__(self) -> str:
        return "PREDICATE_SHOW_ALL_FLASHCARDS"


PREDICATE_SHOW_ALL_FLASHCARDS = ShowAllPredicate()
