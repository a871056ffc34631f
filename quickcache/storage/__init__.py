"""Storage package for QuickCache.

Only StorageManager and the two JSON storages are exported as the public API.
"""

from .json_storage import JsonQuickCacheStorage, JsonUserPrefsStorage
from .storage_manager import StorageManager

__all__ = ["JsonQuickCacheStorage", "JsonUserPrefsStorage", "StorageManager"]
