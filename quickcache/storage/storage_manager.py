import logging
from pathlib import Path
from typing import Optional

from ..flashcard_list import QuickCache
from ..prefs import UserPrefs
from .json_storage import JsonQuickCacheStorage, JsonUserPrefsStorage

logger = logging.getLogger(__name__)


class StorageManager:
    """
    Acts as a Facade over the QuickCache and user preferences storages.
    """

    def __init__(
        self,
        quickcache_storage: JsonQuickCacheStorage,
        user_prefs_storage: JsonUserPrefsStorage,
    ):
        self._quickcache_storage = quickcache_storage
        self._user_prefs_storage = user_prefs_storage

    @classmethod
    def from_paths(
        cls, quickcache_file: Path, user_prefs_file: Path
    ) -> "StorageManager":
        return cls(
            JsonQuickCacheStorage(quickcache_file),
            JsonUserPrefsStorage(user_prefs_file),
        )

    # --- User preferences ---

    @property
    def user_prefs_file_path(self) -> Path:
        return self._user_prefs_storage.user_prefs_file_path

    def read_user_prefs(self) -> Optional[UserPrefs]:
        return self._user_prefs_storage.read_user_prefs()

    def save_user_prefs(self, user_prefs: UserPrefs) -> None:
        self._user_prefs_storage.save_user_prefs(user_prefs)

    # --- QuickCache ---

    @property
    def quickcache_file_path(self) -> Path:
        return self._quickcache_storage.quickcache_file_path

    def read_quickcache(
        self, file_path: Optional[Path] = None
    ) -> Optional[QuickCache]:
        logger.debug(
            "Attempting to read data from file: %s",
            file_path or self.quickcache_file_path,
        )
        return self._quickcache_storage.read_quickcache(file_path)

    def save_quickcache(
        self, quickcache: QuickCache, file_path: Optional[Path] = None
    ) -> None:
        self._quickcache_storage.save_quickcache(quickcache, file_path)
