import logging
from typing import Optional

from ..constants import CLEAR_STATS_COMMAND_WORD, STATS_COMMAND_WORD
from ..model_manager import ModelManager
from ..models import Statistics
from .base import Command, CommandResult, get_displayed_flashcard

logger = logging.getLogger(__name__)


class StatsCommand(Command):
    """
    Shows the quiz statistics of one displayed flashcard, or the combined
    statistics of every displayed flashcard when no index is given.
    """

    COMMAND_WORD = STATS_COMMAND_WORD
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Shows the statistics of the flashcard identified by "
        "the index number used in the displayed flashcard list, or of all "
        "displayed flashcards.\n"
        "Parameters: [INDEX] (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SINGLE = "Statistics for flashcard: %s"
    MESSAGE_AGGREGATE = "Statistics for %d displayed flashcards"

    def __init__(self, index: Optional[int] = None):
        self.index = index

    def execute(self, model: ModelManager) -> CommandResult:
        if self.index is not None:
            flashcard = get_displayed_flashcard(model, self.index)
            return CommandResult(
                self.MESSAGE_SINGLE % flashcard.question,
                flashcard=flashcard,
                statistics=flashcard.statistics,
            )

        displayed = model.filtered_flashcards
        total = sum((f.statistics for f in displayed), Statistics())
        return CommandResult(
            self.MESSAGE_AGGREGATE % len(displayed), statistics=total
        )


class ClearStatsCommand(Command):
    COMMAND_WORD = CLEAR_STATS_COMMAND_WORD
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Resets the statistics of the flashcard identified "
        "by the index number used in the displayed flashcard list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS = "Statistics cleared for flashcard: %s"

    def __init__(self, index: int):
        self.index = index

    def execute(self, model: ModelManager) -> CommandResult:
        flashcard = get_displayed_flashcard(model, self.index)
        cleared = flashcard.with_statistics(flashcard.statistics.reset())
        model.set_flashcard(flashcard, cleared)
        logger.info("Cleared statistics of flashcard %d", self.index)
        return CommandResult(
            self.MESSAGE_SUCCESS % cleared.question,
            flashcard=cleared,
            statistics=cleared.statistics,
        )
