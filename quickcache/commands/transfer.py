"""
Export and import of flashcards to and from files in the data directory.
"""

import logging
from pathlib import Path
from typing import List, Tuple

from ..constants import EXPORT_COMMAND_WORD, IMPORT_COMMAND_WORD, YAML_SUFFIXES
from ..exceptions import CommandError, DataConversionError
from ..flashcard_list import QuickCache
from ..model_manager import ModelManager
from ..models import Flashcard
from ..predicates import PREDICATE_SHOW_ALL_FLASHCARDS
from ..storage.deck_import import DeckImportError, read_deck_file
from ..storage.json_storage import JsonQuickCacheStorage
from .base import Command, CommandResult

logger = logging.getLogger(__name__)


def _data_directory(model: ModelManager) -> Path:
    """Exported and imported files live beside the QuickCache data file."""
    return model.quickcache_file_path.parent


class ExportCommand(Command):
    COMMAND_WORD = EXPORT_COMMAND_WORD
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Exports the displayed flashcards to a JSON file in "
        "the data directory.\n"
        "Parameters: FILE_NAME\n"
        f"Example: {COMMAND_WORD} algorithms.json"
    )
    MESSAGE_SUCCESS = "Exported %d flashcard(s) to %s"
    MESSAGE_FAILURE = "Could not export to %s: %s"
    MESSAGE_YAML_FILE_NAME = (
        "Flashcards are exported as JSON; the file name cannot end in "
        ".yaml or .yml"
    )

    def __init__(self, file_name: str):
        self.file_name = file_name

    def execute(self, model: ModelManager) -> CommandResult:
        target = _data_directory(model) / self.file_name
        to_export = QuickCache(model.filtered_flashcards)
        try:
            JsonQuickCacheStorage(target).save_quickcache(to_export)
        except OSError as e:
            raise CommandError(
                self.MESSAGE_FAILURE % (target, e), original_exception=e
            ) from e

        logger.info("Exported %d flashcards to %s", len(to_export), target)
        return CommandResult(self.MESSAGE_SUCCESS % (len(to_export), target))


class ImportCommand(Command):
    """
    Imports flashcards from a JSON data file or a YAML deck file in the data
    directory. Flashcards already in the QuickCache are skipped.
    """

    COMMAND_WORD = IMPORT_COMMAND_WORD
    MESSAGE_USAGE = (
        f"{COMMAND_WORD}: Imports flashcards from a JSON or YAML file in the "
        "data directory, skipping duplicates.\n"
        "Parameters: FILE_NAME\n"
        f"Example: {COMMAND_WORD} algorithms.json"
    )
    MESSAGE_SUCCESS = "Imported %d flashcard(s), skipped %d duplicate(s)"
    MESSAGE_INVALID_CARDS = "%d card(s) could not be read:"
    MESSAGE_FILE_NOT_FOUND = "File %s does not exist"
    MESSAGE_FAILURE = "Could not import %s: %s"

    def __init__(self, file_name: str):
        self.file_name = file_name

    def _read(self, source: Path) -> Tuple[List[Flashcard], List[DeckImportError]]:
        if source.suffix.lower() in YAML_SUFFIXES:
            return read_deck_file(source)
        quickcache = JsonQuickCacheStorage(source).read_quickcache()
        return list(quickcache or ()), []

    def execute(self, model: ModelManager) -> CommandResult:
        source = _data_directory(model) / self.file_name
        if not source.is_file():
            raise CommandError(self.MESSAGE_FILE_NOT_FOUND % source)

        try:
            flashcards, errors = self._read(source)
        except (DataConversionError, OSError) as e:
            raise CommandError(
                self.MESSAGE_FAILURE % (source, e), original_exception=e
            ) from e

        imported = 0
        duplicates = 0
        for flashcard in flashcards:
            if model.has_flashcard(flashcard):
                duplicates += 1
                continue
            model.add_flashcard(flashcard)
            imported += 1
        model.update_filtered_flashcard_list(PREDICATE_SHOW_ALL_FLASHCARDS)

        for error in errors:
            logger.warning("Skipped card during import: %s", error)
        logger.info(
            "Imported %d flashcards from %s (%d duplicates, %d invalid)",
            imported,
            source,
            duplicates,
            len(errors),
        )

        feedback = self.MESSAGE_SUCCESS % (imported, duplicates)
        if errors:
            lines = [self.MESSAGE_INVALID_CARDS % len(errors)]
            lines.extend(f"- {error}" for error in errors)
            feedback = "\n".join([feedback, *lines])
        return CommandResult(feedback, show_list=True)
