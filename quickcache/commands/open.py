from ..constants import OPEN_COMMAND_WORD
from ..model_manager import ModelManager
from .base import Command, CommandResult, get_displayed_flashcard


class OpenCommand(Command):
    """
    Opens a flashcard for study: the front end shows its question (and
    choices) while keeping the answer hidden.
    """

    COMMAND_WORD = OPEN_COMMAND_WORD
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Opens the flashcard identified by the index number "
        "used in the displayed flashcard list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_OPEN_FLASHCARD_SUCCESS = "Opened flashcard %d"

    def __init__(self, index: int):
        self.index = index

    def execute(self, model: ModelManager) -> CommandResult:
        flashcard = get_displayed_flashcard(model, self.index)
        return CommandResult(
            self.MESSAGE_OPEN_FLASHCARD_SUCCESS % self.index,
            flashcard=flashcard,
            show_flashcard=True,
        )
