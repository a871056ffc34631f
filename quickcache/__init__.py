"""QuickCache - A command-driven flashcard application."""

from .flashcard_list import QuickCache
from .logic import LogicManager
from .model_manager import ModelManager
from .models import Difficulty, Flashcard, Statistics
from .parser import QuickCacheParser
from .storage import StorageManager

__all__ = [
    "Difficulty",
    "Flashcard",
    "LogicManager",
    "ModelManager",
    "QuickCache",
    "QuickCacheParser",
    "Statistics",
    "StorageManager",
]
