"""
Reads flashcards from YAML deck files of the form::

    deck: Algorithms
    tags: [year-one]
    cards:
      - q: What is the worst case of merge sort?
        a: O(n log n)
      - q: Which one is stable?
        a: 2
        choices: [Quick sort, Merge sort]
        difficulty: high
        tags: [sorting]
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Set, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import DataConversionError
from ..models import (
    Difficulty,
    Flashcard,
    first_error_message,
    resolve_choice_answer,
)

logger = logging.getLogger(__name__)


class _RawYAMLCardEntry(BaseModel):
    q: str = Field(..., min_length=1)
    a: str = Field(..., min_length=1)
    choices: Optional[List[str]] = Field(default_factory=lambda: [])
    difficulty: Optional[str] = Field(default=None)
    tags: Optional[List[str]] = Field(default_factory=lambda: [])

    model_config = ConfigDict(extra="forbid")

    @field_validator("a", mode="before")
    @classmethod
    def coerce_numeric_answer(cls, v: Any) -> Any:
        """YAML reads ``a: 2`` as an int; keep it usable as a choice number."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("choices", mode="before")
    @classmethod
    def coerce_choices(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [str(c) if isinstance(c, (int, float)) else c for c in v]
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v: Any) -> Any:
        """Trim string tags when a list is provided."""
        if isinstance(v, list):
            return [tag.strip() if isinstance(tag, str) else tag for tag in v]
        return v


class _RawYAMLDeckFile(BaseModel):
    deck: str = Field(..., min_length=1)
    tags: Optional[List[str]] = Field(default_factory=lambda: [])
    cards: List[Any] = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid")


@dataclass
class DeckImportError:
    """A card of a deck file that could not be turned into a Flashcard."""

    file_path: Path
    card_index: int
    message: str

    def __str__(self) -> str:
        # card_index is 0-based; users count cards from 1
        return f"{self.file_path.name}, card {self.card_index + 1}: {self.message}"


def _card_from_raw(raw: _RawYAMLCardEntry, deck_tags: Set[str]) -> Flashcard:
    choices = tuple(c.strip() for c in raw.choices or [])
    difficulty = (
        Difficulty.from_string(raw.difficulty)
        if raw.difficulty
        else Difficulty.UNSPECIFIED
    )
    return Flashcard(
        question=raw.q.strip(),
        answer=resolve_choice_answer(raw.a.strip(), choices),
        choices=choices,
        tags=deck_tags.union(raw.tags or []),
        difficulty=difficulty,
    )


def _process_single_raw_card(
    card_dict: Any, idx: int, deck_tags: Set[str], file_path: Path
) -> Union[Flashcard, DeckImportError]:
    """
    Validate one raw card entry and convert it into a Flashcard.

    Returns:
        Union[Flashcard, DeckImportError]: The flashcard, or an error holding
        the card index.
    """
    if not isinstance(card_dict, dict):
        return DeckImportError(
            file_path=file_path,
            card_index=idx,
            message="Card entry is not a dictionary.",
        )

    try:
        raw = _RawYAMLCardEntry.model_validate(card_dict)
        return _card_from_raw(raw, deck_tags)
    except ValidationError as e:
        message = first_error_message(e)
    except ValueError as e:
        message = str(e)
    return DeckImportError(
        file_path=file_path,
        card_index=idx,
        message=f"Card validation failed: {message}",
    )


def read_deck_file(
    file_path: Path,
) -> Tuple[List[Flashcard], List[DeckImportError]]:
    """
    Parse a YAML deck file into flashcards.

    Deck-level tags are merged into every card. Invalid cards are reported
    individually and do not prevent the valid ones from being returned.

    Returns:
        Tuple[List[Flashcard], List[DeckImportError]]: The valid flashcards
        and the errors of the cards that were skipped.

    Raises:
        DataConversionError: If the file is not UTF-8 YAML or the deck
            itself does not match the expected structure.
        OSError: If the file cannot be read.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DataConversionError(
            f"{file_path.name} is not valid UTF-8 text: {e.reason}",
            original_exception=e,
        ) from e

    try:
        raw_content = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DataConversionError(
            f"Invalid YAML syntax in {file_path.name}: {e}",
            original_exception=e,
        ) from e

    if not isinstance(raw_content, dict):
        raise DataConversionError(
            f"Top level of {file_path.name} must be a dictionary (deck object)."
        )

    try:
        deck = _RawYAMLDeckFile.model_validate(raw_content)
    except ValidationError as e:
        error_details = e.errors()[0]
        field = ".".join(map(str, error_details["loc"]))
        raise DataConversionError(
            f"Validation error in field '{field}': {error_details['msg']}",
            original_exception=e,
        ) from e

    deck_tags = {tag.strip() for tag in deck.tags or []}
    flashcards: List[Flashcard] = []
    errors: List[DeckImportError] = []
    for idx, card_dict in enumerate(deck.cards):
        result = _process_single_raw_card(card_dict, idx, deck_tags, file_path)
        if isinstance(result, Flashcard):
            flashcards.append(result)
        else:
            errors.append(result)

    logger.info(
        "Read %s cards from deck '%s' in %s with %s errors.",
        len(flashcards),
        deck.deck,
        file_path,
        len(errors),
    )
    return flashcards, errors
