"""
Base class for commands and the result they hand back to the front end.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..exceptions import CommandError
from ..messages import MESSAGE_INVALID_FLASHCARD_DISPLAYED_INDEX
from ..model_manager import ModelManager
from ..models import Flashcard, Statistics


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command, rendered by the front end."""

    feedback_to_user: str
    show_help: bool = False
    exit: bool = False
    show_list: bool = False
    show_flashcard: bool = False
    flashcard: Optional[Flashcard] = None
    statistics: Optional[Statistics] = None
    is_correct: Optional[bool] = None


class Command(ABC):
    """
    A parsed user instruction that can be executed against the model.

    Commands compare equal when they are of the same type and carry the same
    arguments, which keeps parser tests simple.
    """

    COMMAND_WORD: str = ""
    MESSAGE_USAGE: str = ""

    @abstractmethod
    def execute(self, model: ModelManager) -> CommandResult:
        """
        Execute the command and return its result.

        Raises:
            CommandError: If the command cannot be carried out.
        """

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({args})"


def get_displayed_flashcard(model: ModelManager, index: int) -> Flashcard:
    """
    Look up a flashcard by its 1-based position in the displayed list.

    Raises:
        CommandError: If ``index`` is outside the displayed list.
    """
    flashcards = model.filtered_flashcards
    if index < 1 or index > len(flashcards):
        raise CommandError(MESSAGE_INVALID_FLASHCARD_DISPLAYED_INDEX)
    return flashcards[index - 1]
