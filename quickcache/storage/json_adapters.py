"""
JSON-friendly versions of the domain models and the conversions between them.
This keeps the storage format independent of the in-memory representation.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import DataConversionError
from ..flashcard_list import QuickCache, flashcards_are_unique
from ..models import (
    DIFFICULTY_CONSTRAINTS,
    Difficulty,
    Flashcard,
    Statistics,
    first_error_message,
)

MESSAGE_DUPLICATE_FLASHCARD = "Flashcards list contains duplicate flashcard(s)."


class JsonAdaptedStatistics(BaseModel):
    model_config = ConfigDict(extra="forbid")

    times_tested: int = 0
    times_tested_correct: int = 0


class JsonAdaptedFlashcard(BaseModel):
    """
    Stored form of a Flashcard. Values are only checked against the domain
    rules in ``to_model_type`` so that the error names the offending card.
    """

    model_config = ConfigDict(extra="forbid")

    question: str
    answer: str
    choices: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    difficulty: str = Difficulty.UNSPECIFIED.value
    statistics: JsonAdaptedStatistics = Field(
        default_factory=JsonAdaptedStatistics
    )

    @classmethod
    def from_model(cls, source: Flashcard) -> "JsonAdaptedFlashcard":
        return cls(
            question=source.question,
            answer=source.answer,
            choices=list(source.choices),
            tags=sorted(source.tags),
            difficulty=source.difficulty.value,
            statistics=JsonAdaptedStatistics(
                times_tested=source.statistics.times_tested,
                times_tested_correct=source.statistics.times_tested_correct,
            ),
        )

    def to_model_type(self) -> Flashcard:
        """
        Convert this stored flashcard back into a Flashcard.

        Raises:
            DataConversionError: If any stored value violates a model
                constraint.
        """
        try:
            difficulty = Difficulty(self.difficulty.strip().upper())
        except ValueError:
            raise DataConversionError(DIFFICULTY_CONSTRAINTS) from None

        try:
            return Flashcard(
                question=self.question,
                answer=self.answer,
                choices=tuple(self.choices),
                tags=frozenset(self.tags),
                difficulty=difficulty,
                statistics=Statistics(
                    times_tested=self.statistics.times_tested,
                    times_tested_correct=self.statistics.times_tested_correct,
                ),
            )
        except ValidationError as e:
            raise DataConversionError(
                f"Invalid flashcard '{self.question[:50]}': "
                f"{first_error_message(e)}",
                original_exception=e,
            ) from e


class JsonSerializableQuickCache(BaseModel):
    """Top-level document of the QuickCache data file."""

    model_config = ConfigDict(extra="forbid")

    flashcards: List[JsonAdaptedFlashcard] = Field(default_factory=list)

    @classmethod
    def from_model(cls, source: QuickCache) -> "JsonSerializableQuickCache":
        return cls(
            flashcards=[
                JsonAdaptedFlashcard.from_model(f) for f in source.flashcards
            ]
        )

    def to_model_type(self) -> QuickCache:
        """
        Raises:
            DataConversionError: If a flashcard is invalid or the list
                contains duplicates.
        """
        flashcards = [f.to_model_type() for f in self.flashcards]
        if not flashcards_are_unique(flashcards):
            raise DataConversionError(MESSAGE_DUPLICATE_FLASHCARD)
        return QuickCache(flashcards)
