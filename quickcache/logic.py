"""
Glue between user input, the model and storage: parses a line of input,
executes the command and persists the QuickCache afterwards.
"""

import logging
from pathlib import Path
from typing import Tuple

from .commands import CommandResult
from .exceptions import CommandError, DataConversionError
from .flashcard_list import QuickCache
from .model_manager import ModelManager
from .models import Flashcard
from .parser import QuickCacheParser
from .prefs import GuiSettings, UserPrefs
from .sample_data import get_sample_quickcache
from .storage import JsonUserPrefsStorage, StorageManager

logger = logging.getLogger(__name__)

MESSAGE_SAVE_FAILED = "Could not save data to file: %s"


class LogicManager:
    """Executes user input against a model and saves the result."""

    def __init__(self, model: ModelManager, storage: StorageManager):
        self._model = model
        self._storage = storage
        self._parser = QuickCacheParser()

    def execute(self, command_text: str) -> CommandResult:
        """
        Parse and execute ``command_text``, then save the QuickCache.

        Raises:
            ParseError: If the input cannot be parsed.
            CommandError: If the command fails or the data cannot be saved.
        """
        logger.info("----------------[USER COMMAND][%s]", command_text)
        command = self._parser.parse_command(command_text)
        result = command.execute(self._model)

        try:
            self._storage.save_quickcache(self._model.quickcache)
        except OSError as e:
            raise CommandError(MESSAGE_SAVE_FAILED % e, original_exception=e) from e
        return result

    @property
    def quickcache(self) -> QuickCache:
        return self._model.quickcache

    @property
    def filtered_flashcards(self) -> Tuple[Flashcard, ...]:
        return self._model.filtered_flashcards

    @property
    def quickcache_file_path(self) -> Path:
        return self._model.quickcache_file_path

    @property
    def gui_settings(self) -> GuiSettings:
        return self._model.gui_settings

    @gui_settings.setter
    def gui_settings(self, gui_settings: GuiSettings) -> None:
        self._model.gui_settings = gui_settings


# ---------------------------------------------------------------------------
# Start-up
# ---------------------------------------------------------------------------


def init_prefs(storage: JsonUserPrefsStorage) -> UserPrefs:
    """
    Read the user preferences, falling back to defaults when the file is
    missing or unreadable. The preferences file is rewritten either way so
    that it exists with every field present.
    """
    prefs_file = storage.user_prefs_file_path
    logger.info("Using prefs file: %s", prefs_file)

    try:
        prefs = storage.read_user_prefs()
        if prefs is None:
            logger.info("Creating new preference file %s", prefs_file)
            prefs = UserPrefs()
    except (DataConversionError, OSError) as e:
        logger.warning(
            "Preference file at %s could not be loaded. "
            "Using default preferences: %s",
            prefs_file,
            e,
        )
        prefs = UserPrefs()

    try:
        storage.save_user_prefs(prefs)
    except OSError as e:
        logger.warning("Failed to save preference file: %s", e)
    return prefs


def init_model(storage: StorageManager, user_prefs: UserPrefs) -> ModelManager:
    """
    Build the model from the stored QuickCache.

    A missing data file yields the sample QuickCache. An unreadable or invalid
    one yields an empty QuickCache.
    """
    try:
        quickcache = storage.read_quickcache()
        if quickcache is None:
            logger.info("Data file not found. Will be starting with a sample QuickCache")
            quickcache = get_sample_quickcache()
    except DataConversionError as e:
        logger.warning(
            "Data file not in the correct format. "
            "Will be starting with an empty QuickCache: %s",
            e,
        )
        quickcache = QuickCache()
    except OSError as e:
        logger.warning(
            "Problem while reading from the file. "
            "Will be starting with an empty QuickCache: %s",
            e,
        )
        quickcache = QuickCache()
    return ModelManager(quickcache, user_prefs)
