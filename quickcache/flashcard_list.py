"""
The QuickCache collection and the duplicate-free list backing it.
"""

from typing import Iterable, Iterator, List, Tuple

from .exceptions import DuplicateFlashcardError, FlashcardNotFoundError
from .models import Flashcard


class UniqueFlashcardList:
    """
    An ordered list of flashcards that never holds two flashcards for which
    ``Flashcard.is_same_flashcard`` is true.

    Removal and replacement use full equality so that the exact flashcard
    shown to the user is the one affected.
    """

    def __init__(self) -> None:
        self._flashcards: List[Flashcard] = []

    def contains(self, to_check: Flashcard) -> bool:
        return any(f.is_same_flashcard(to_check) for f in self._flashcards)

    def add(self, to_add: Flashcard) -> None:
        """
        Append a flashcard to the list.

        Raises:
            DuplicateFlashcardError: If an equivalent flashcard already exists.
        """
        if self.contains(to_add):
            raise DuplicateFlashcardError()
        self._flashcards.append(to_add)

    def set_flashcard(self, target: Flashcard, edited: Flashcard) -> None:
        """
        Replace ``target`` in place with ``edited``.

        Raises:
            FlashcardNotFoundError: If ``target`` is not in the list.
            DuplicateFlashcardError: If ``edited`` is equivalent to another
                flashcard in the list.
        """
        index = self._index_of(target)
        if not target.is_same_flashcard(edited) and self.contains(edited):
            raise DuplicateFlashcardError()
        self._flashcards[index] = edited

    def remove(self, to_remove: Flashcard) -> None:
        """
        Raises:
            FlashcardNotFoundError: If ``to_remove`` is not in the list.
        """
        del self._flashcards[self._index_of(to_remove)]

    def set_flashcards(self, flashcards: Iterable[Flashcard]) -> None:
        """
        Replace the whole content of the list.

        Raises:
            DuplicateFlashcardError: If ``flashcards`` contains duplicates.
        """
        replacement = list(flashcards)
        if not flashcards_are_unique(replacement):
            raise DuplicateFlashcardError()
        self._flashcards = replacement

    def as_tuple(self) -> Tuple[Flashcard, ...]:
        return tuple(self._flashcards)

    def _index_of(self, target: Flashcard) -> int:
        for i, flashcard in enumerate(self._flashcards):
            if flashcard == target:
                return i
        raise FlashcardNotFoundError()

    def __iter__(self) -> Iterator[Flashcard]:
        return iter(list(self._flashcards))

    def __len__(self) -> int:
        return len(self._flashcards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueFlashcardList):
            return NotImplemented
        return self._flashcards == other._flashcards


def flashcards_are_unique(flashcards: List[Flashcard]) -> bool:
    """Returns True if no two flashcards in ``flashcards`` are the same."""
    for i, first in enumerate(flashcards):
        for second in flashcards[i + 1:]:
            if first.is_same_flashcard(second):
                return False
    return True


class QuickCache:
    """
    In-memory collection of the user's flashcards.

    Duplicates are not allowed (by ``Flashcard.is_same_flashcard``).
    """

    def __init__(self, flashcards: Iterable[Flashcard] = ()) -> None:
        self._flashcards = UniqueFlashcardList()
        self._flashcards.set_flashcards(flashcards)

    @classmethod
    def from_quickcache(cls, other: "QuickCache") -> "QuickCache":
        """Create an independent copy of ``other``."""
        return cls(other.flashcards)

    @property
    def flashcards(self) -> Tuple[Flashcard, ...]:
        """Read-only view of all flashcards in insertion order."""
        return self._flashcards.as_tuple()

    def reset_data(self, new_data: "QuickCache") -> None:
        self._flashcards.set_flashcards(new_data.flashcards)

    def has_flashcard(self, flashcard: Flashcard) -> bool:
        return self._flashcards.contains(flashcard)

    def add_flashcard(self, flashcard: Flashcard) -> None:
        """The flashcard must not already exist in the QuickCache."""
        self._flashcards.add(flashcard)

    def set_flashcard(self, target: Flashcard, edited: Flashcard) -> None:
        """``target`` must exist; ``edited`` must not duplicate another card."""
        self._flashcards.set_flashcard(target, edited)

    def remove_flashcard(self, flashcard: Flashcard) -> None:
        self._flashcards.remove(flashcard)

    def __iter__(self) -> Iterator[Flashcard]:
        return iter(self._flashcards)

    def __len__(self) -> int:
        return len(self._flashcards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuickCache):
            return NotImplemented
        return self._flashcards == other._flashcards

    def __repr__(self) -> str:
        return f"QuickCache({len(self)} flashcards)"
