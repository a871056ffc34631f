"""
Flashcard domain models.

Flashcards are immutable; every change produces a new instance. Validation
rules live next to the fields they guard so that parsers can reuse the same
checks before constructing anything.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .messages import MESSAGE_ANSWER_NOT_IN_CHOICES, MESSAGE_DUPLICATE_CHOICES

# The first character must not be whitespace, otherwise " " (a blank string)
# becomes a valid input.
NOT_BLANK_REGEX_PATTERN = r"^[^\s].*"
# Alphanumeric words joined by single hyphens (e.g. "cs2103", "year-one")
TAG_REGEX_PATTERN = r"^[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*$"

QUESTION_CONSTRAINTS = (
    "Questions can take any values, and it should not be blank"
)
ANSWER_CONSTRAINTS = "Answers can take any values, and it should not be blank"
CHOICE_CONSTRAINTS = "Choices can take any values, and it should not be blank"
TAG_CONSTRAINTS = (
    "Tags names should be alphanumeric, optionally joined by single hyphens"
)
DIFFICULTY_CONSTRAINTS = "Difficulty should only be LOW, MEDIUM or HIGH"


def _is_not_blank(text: str) -> bool:
    return re.match(NOT_BLANK_REGEX_PATTERN, text, re.DOTALL) is not None


def is_valid_question(text: str) -> bool:
    """Returns True if ``text`` is a valid question."""
    return _is_not_blank(text)


def is_valid_answer(text: str) -> bool:
    """Returns True if ``text`` is a valid answer."""
    return _is_not_blank(text)


def is_valid_choice(text: str) -> bool:
    """Returns True if ``text`` is a valid multiple-choice option."""
    return _is_not_blank(text)


def is_valid_tag(text: str) -> bool:
    """Returns True if ``text`` is a valid tag name."""
    return re.match(TAG_REGEX_PATTERN, text) is not None


def resolve_choice_answer(answer: str, choices: Sequence[str]) -> str:
    """
    Resolve the answer of a multiple-choice question to the text of a choice.

    The answer may be the exact text of a choice or its 1-based number; an
    exact text match takes precedence. Anything else is returned unchanged
    and left to the Flashcard validators to reject.
    """
    if choices and answer not in choices and answer.isascii() and answer.isdigit():
        number = int(answer)
        if 1 <= number <= len(choices):
            return choices[number - 1]
    return answer


class Difficulty(str, Enum):
    """
    How hard the user considers a flashcard to be.
    """

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    UNSPECIFIED = "UNSPECIFIED"

    @classmethod
    def is_valid_difficulty(cls, text: str) -> bool:
        """Only the three user-assignable levels are accepted as input."""
        return text.strip().upper() in {"LOW", "MEDIUM", "HIGH"}

    @classmethod
    def from_string(cls, text: str) -> "Difficulty":
        """
        Convert user input (case-insensitive) into a Difficulty.

        Raises:
            ValueError: If ``text`` does not name a user-assignable level.
        """
        if not cls.is_valid_difficulty(text):
            raise ValueError(DIFFICULTY_CONSTRAINTS)
        return cls(text.strip().upper())


class Statistics(BaseModel):
    """
    Quiz record of a single flashcard.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    times_tested: int = Field(
        default=0,
        ge=0,
        description="Number of times the flashcard was tested.",
    )
    times_tested_correct: int = Field(
        default=0,
        ge=0,
        description="Number of tests answered correctly.",
    )

    @model_validator(mode="after")
    def check_correct_not_above_tested(self) -> "Statistics":
        if self.times_tested_correct > self.times_tested:
            raise ValueError(
                "times_tested_correct cannot exceed times_tested"
            )
        return self

    def record(self, is_correct: bool) -> "Statistics":
        """Return the statistics after one more test."""
        return Statistics(
            times_tested=self.times_tested + 1,
            times_tested_correct=self.times_tested_correct + int(is_correct),
        )

    def reset(self) -> "Statistics":
        return Statistics()

    @property
    def times_tested_incorrect(self) -> int:
        return self.times_tested - self.times_tested_correct

    @property
    def correct_rate(self) -> float:
        """Percentage of correct answers, 0.0 if never tested."""
        if self.times_tested == 0:
            return 0.0
        return self.times_tested_correct / self.times_tested * 100

    def __add__(self, other: "Statistics") -> "Statistics":
        return Statistics(
            times_tested=self.times_tested + other.times_tested,
            times_tested_correct=(
                self.times_tested_correct + other.times_tested_correct
            ),
        )


class Flashcard(BaseModel):
    """
    A single study record: an open-ended or multiple-choice question and its
    answer.

    A flashcard is multiple-choice when ``choices`` is non-empty; its answer
    must then be one of the choices.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    question: str = Field(..., description="Question text shown to the user.")
    answer: str = Field(..., description="Expected answer text.")
    choices: Tuple[str, ...] = Field(
        default=(),
        description="Ordered options of a multiple-choice question.",
    )
    tags: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Unique tags used for filtering.",
    )
    difficulty: Difficulty = Field(
        default=Difficulty.UNSPECIFIED,
        description="User-assigned difficulty.",
    )
    statistics: Statistics = Field(
        default_factory=Statistics,
        description="Quiz record of this flashcard.",
    )

    @field_validator("question")
    @classmethod
    def validate_question(cls, v: str) -> str:
        if not is_valid_question(v):
            raise ValueError(QUESTION_CONSTRAINTS)
        return v

    @field_validator("answer")
    @classmethod
    def validate_answer(cls, v: str) -> str:
        if not is_valid_answer(v):
            raise ValueError(ANSWER_CONSTRAINTS)
        return v

    @field_validator("choices")
    @classmethod
    def validate_choices(cls, choices: Tuple[str, ...]) -> Tuple[str, ...]:
        """Ensure each choice is non-blank and no choice is repeated."""
        for choice in choices:
            if not is_valid_choice(choice):
                raise ValueError(CHOICE_CONSTRAINTS)
        if len(set(choices)) != len(choices):
            raise ValueError(MESSAGE_DUPLICATE_CHOICES)
        return choices

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, tags: FrozenSet[str]) -> FrozenSet[str]:
        for tag in tags:
            if not is_valid_tag(tag):
                raise ValueError(f"Tag '{tag}': {TAG_CONSTRAINTS}")
        return tags

    @model_validator(mode="after")
    def check_answer_in_choices(self) -> "Flashcard":
        if self.choices and self.answer not in self.choices:
            raise ValueError(MESSAGE_ANSWER_NOT_IN_CHOICES)
        return self

    @property
    def is_multiple_choice(self) -> bool:
        return bool(self.choices)

    def choice_at(self, option: int) -> Optional[str]:
        """Return the 1-based ``option``-th choice, or None if out of range."""
        if 1 <= option <= len(self.choices):
            return self.choices[option - 1]
        return None

    def is_same_flashcard(self, other: Optional["Flashcard"]) -> bool:
        """
        Weaker notion of equality used for duplicate detection.

        Two flashcards are the same when they ask the same question (including
        its choices) and expect the same answer. Tags, difficulty and
        statistics are ignored.
        """
        if other is self:
            return True
        return (
            other is not None
            and other.question == self.question
            and other.choices == self.choices
            and other.answer == self.answer
        )

    def is_correct_answer(self, attempt: str) -> bool:
        """Case-insensitive comparison of ``attempt`` with the answer."""
        return attempt.strip().casefold() == self.answer.strip().casefold()

    def is_correct_option(self, option: int) -> bool:
        return self.choice_at(option) == self.answer

    def has_tags(self, tags: Iterable[str]) -> bool:
        """True when every tag in ``tags`` is on this flashcard."""
        return set(tags).issubset(self.tags)

    def with_statistics(self, statistics: Statistics) -> "Flashcard":
        return self.model_copy(update={"statistics": statistics})

    def __str__(self) -> str:
        parts = [f"Question: {self.question}", f"Answer: {self.answer}"]
        if self.choices:
            numbered = ", ".join(
                f"{i}. {choice}" for i, choice in enumerate(self.choices, 1)
            )
            parts.append(f"Choices: {numbered}")
        parts.append(f"Difficulty: {self.difficulty.value}")
        parts.append("Tags: " + "".join(f"[{t}]" for t in sorted(self.tags)))
        return "; ".join(parts)


def first_error_message(error: ValidationError) -> str:
    """
    Extract the user-facing message of the first error in a ValidationError.

    Messages raised by our own validators are returned verbatim, without
    pydantic's "Value error, " prefix.
    """
    details = error.errors()[0]
    ctx_error = details.get("ctx", {}).get("error")
    if isinstance(ctx_error, ValueError):
        return str(ctx_error)
    return details["msg"]
