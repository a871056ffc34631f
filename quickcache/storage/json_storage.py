"""
JSON file storage for the QuickCache and the user preferences.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..exceptions import DataConversionError
from ..flashcard_list import QuickCache
from ..prefs import UserPrefs
from .json_adapters import JsonSerializableQuickCache

logger = logging.getLogger(__name__)


def _write_json(path: Path, content: str) -> None:
    """Write ``content`` to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content + "\n", encoding="utf-8")


def _read_text(path: Path, description: str) -> str:
    """
    Read ``path`` as UTF-8 text.

    Raises:
        DataConversionError: If the file is not valid UTF-8.
        OSError: If the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DataConversionError(
            f"{description} {path} is not valid UTF-8 text: {e.reason}",
            original_exception=e,
        ) from e


class JsonQuickCacheStorage:
    """Reads and writes a QuickCache as a JSON document."""

    def __init__(self, file_path: Path):
        self._file_path = Path(file_path)

    @property
    def quickcache_file_path(self) -> Path:
        return self._file_path

    def read_quickcache(
        self, file_path: Optional[Path] = None
    ) -> Optional[QuickCache]:
        """
        Load a QuickCache from ``file_path`` (default: this storage's file).

        Returns:
            Optional[QuickCache]: The stored QuickCache, or None if the file
            does not exist.

        Raises:
            DataConversionError: If the file is not UTF-8 JSON or holds
                invalid flashcards.
            OSError: If the file exists but cannot be read.
        """
        path = Path(file_path) if file_path is not None else self._file_path
        if not path.exists():
            logger.info("QuickCache file %s not found", path)
            return None

        content = _read_text(path, "Data file")
        try:
            serialized = JsonSerializableQuickCache.model_validate_json(content)
        except ValidationError as e:
            raise DataConversionError(
                f"Data file {path} is not in the correct format: "
                f"{e.errors()[0]['msg']}",
                original_exception=e,
            ) from e
        quickcache = serialized.to_model_type()
        logger.info("Loaded %d flashcards from %s", len(quickcache), path)
        return quickcache

    def save_quickcache(
        self, quickcache: QuickCache, file_path: Optional[Path] = None
    ) -> None:
        """
        Raises:
            OSError: If the file cannot be written.
        """
        path = Path(file_path) if file_path is not None else self._file_path
        serialized = JsonSerializableQuickCache.from_model(quickcache)
        _write_json(path, serialized.model_dump_json(indent=2))
        logger.debug("Saved %d flashcards to %s", len(quickcache), path)


class JsonUserPrefsStorage:
    """Reads and writes UserPrefs as a JSON document."""

    def __init__(self, file_path: Path):
        self._file_path = Path(file_path)

    @property
    def user_prefs_file_path(self) -> Path:
        return self._file_path

    def read_user_prefs(self) -> Optional[UserPrefs]:
        """
        Returns:
            Optional[UserPrefs]: The stored preferences, or None if the file
            does not exist.

        Raises:
            DataConversionError: If the file is not valid preferences JSON.
            OSError: If the file exists but cannot be read.
        """
        if not self._file_path.exists():
            logger.info("Preferences file %s not found", self._file_path)
            return None
        content = _read_text(self._file_path, "Preferences file")
        try:
            return UserPrefs.model_validate_json(content)
        except ValidationError as e:
            raise DataConversionError(
                f"Preferences file {self._file_path} is not in the correct "
                f"format: {e.errors()[0]['msg']}",
                original_exception=e,
            ) from e

    def save_user_prefs(self, user_prefs: UserPrefs) -> None:
        _write_json(self._file_path, user_prefs.model_dump_json(indent=2))
        logger.debug("Saved preferences to %s", self._file_path)
