"""
Field parsers shared by the command parsers. Each one trims its input and
raises ParseError with a user-facing message when the input is invalid.
"""

from pathlib import PurePath
from typing import FrozenSet, Iterable, Sequence, Tuple

from ..exceptions import ParseError
from ..messages import (
    MESSAGE_ANSWER_NOT_IN_CHOICES,
    MESSAGE_DUPLICATE_CHOICES,
    MESSAGE_INVALID_FILE_NAME,
    MESSAGE_INVALID_INDEX,
)
from ..models import (
    ANSWER_CONSTRAINTS,
    CHOICE_CONSTRAINTS,
    DIFFICULTY_CONSTRAINTS,
    QUESTION_CONSTRAINTS,
    TAG_CONSTRAINTS,
    Difficulty,
    is_valid_answer,
    is_valid_choice,
    is_valid_question,
    is_valid_tag,
    resolve_choice_answer,
)


def parse_index(one_based_index: str) -> int:
    """
    Parse a 1-based index typed by the user.

    Raises:
        ParseError: If the index is not a non-zero unsigned integer.
    """
    trimmed = one_based_index.strip()
    if not (trimmed.isascii() and trimmed.isdigit()) or int(trimmed) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(trimmed)


def parse_question(question: str) -> str:
    trimmed = question.strip()
    if not is_valid_question(trimmed):
        raise ParseError(QUESTION_CONSTRAINTS)
    return trimmed


def parse_answer(answer: str) -> str:
    trimmed = answer.strip()
    if not is_valid_answer(trimmed):
        raise ParseError(ANSWER_CONSTRAINTS)
    return trimmed


def parse_choice(choice: str) -> str:
    trimmed = choice.strip()
    if not is_valid_choice(trimmed):
        raise ParseError(CHOICE_CONSTRAINTS)
    return trimmed


def parse_choices(choices: Iterable[str]) -> Tuple[str, ...]:
    """
    Parse choices, keeping their order.

    Raises:
        ParseError: If any choice is blank or a choice is repeated.
    """
    parsed = tuple(parse_choice(choice) for choice in choices)
    if len(set(parsed)) != len(parsed):
        raise ParseError(MESSAGE_DUPLICATE_CHOICES)
    return parsed


def parse_multiple_choice_answer(answer: str, choices: Sequence[str]) -> str:
    """
    Resolve the answer of a multiple-choice question to one of its choices.

    The answer may be given as the exact text of a choice or as its 1-based
    number. An exact text match takes precedence.

    Raises:
        ParseError: If the answer is blank or matches no choice.
    """
    resolved = resolve_choice_answer(parse_answer(answer), choices)
    if resolved not in choices:
        raise ParseError(MESSAGE_ANSWER_NOT_IN_CHOICES)
    return resolved


def parse_tag(tag: str) -> str:
    trimmed = tag.strip()
    if not is_valid_tag(trimmed):
        raise ParseError(TAG_CONSTRAINTS)
    return trimmed


def parse_tags(tags: Iterable[str]) -> FrozenSet[str]:
    return frozenset(parse_tag(tag) for tag in tags)


def parse_difficulty(difficulty: str) -> Difficulty:
    try:
        return Difficulty.from_string(difficulty)
    except ValueError:
        raise ParseError(DIFFICULTY_CONSTRAINTS) from None


def parse_option(option: str) -> int:
    """Parse the 1-based option number of a multiple-choice answer."""
    return parse_index(option)


def parse_file_name(file_name: str) -> str:
    """
    Parse a bare file name used by export and import.

    Raises:
        ParseError: If the name is blank or contains path components.
    """
    trimmed = file_name.strip()
    if (
        not trimmed
        or PurePath(trimmed).name != trimmed
        or "/" in trimmed
        or "\\" in trimmed
        or trimmed in {".", ".."}
    ):
        raise ParseError(MESSAGE_INVALID_FILE_NAME)
    return trimmed
