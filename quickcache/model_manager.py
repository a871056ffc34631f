"""
In-memory model of the application: the QuickCache, the user preferences
and the currently displayed (filtered) flashcard list.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple

from .flashcard_list import QuickCache
from .models import Flashcard
from .predicates import PREDICATE_SHOW_ALL_FLASHCARDS
from .prefs import GuiSettings, UserPrefs

logger = logging.getLogger(__name__)

FlashcardFilter = Callable[[Flashcard], bool]


class ModelManager:
    """
    Acts as the single entry point through which commands read and modify
    application state.

    Indices typed by the user always refer to ``filtered_flashcards``.
    """

    def __init__(
        self,
        quickcache: Optional[QuickCache] = None,
        user_prefs: Optional[UserPrefs] = None,
    ):
        """
        Initialize the model with copies of the given data.

        Parameters:
            quickcache (Optional[QuickCache]): Initial flashcards; an empty
                QuickCache when omitted.
            user_prefs (Optional[UserPrefs]): Initial preferences; defaults
                when omitted.
        """
        self._quickcache = QuickCache.from_quickcache(quickcache or QuickCache())
        self._user_prefs = UserPrefs()
        if user_prefs is not None:
            self._user_prefs.reset_data(user_prefs)
        self._predicate: FlashcardFilter = PREDICATE_SHOW_ALL_FLASHCARDS
        logger.debug(
            "Initializing with QuickCache: %r and user prefs %r",
            self._quickcache,
            self._user_prefs,
        )

    # --- User preferences ---

    @property
    def user_prefs(self) -> UserPrefs:
        return self._user_prefs

    @user_prefs.setter
    def user_prefs(self, user_prefs: UserPrefs) -> None:
        self._user_prefs.reset_data(user_prefs)

    @property
    def gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    @gui_settings.setter
    def gui_settings(self, gui_settings: GuiSettings) -> None:
        self._user_prefs.gui_settings = gui_settings

    @property
    def quickcache_file_path(self) -> Path:
        return self._user_prefs.quickcache_file_path

    @quickcache_file_path.setter
    def quickcache_file_path(self, path: Path) -> None:
        self._user_prefs.quickcache_file_path = path

    # --- QuickCache ---

    @property
    def quickcache(self) -> QuickCache:
        return self._quickcache

    @quickcache.setter
    def quickcache(self, quickcache: QuickCache) -> None:
        self._quickcache.reset_data(quickcache)

    def has_flashcard(self, flashcard: Flashcard) -> bool:
        """Returns True if an equivalent flashcard exists in the QuickCache."""
        return self._quickcache.has_flashcard(flashcard)

    def delete_flashcard(self, target: Flashcard) -> None:
        """The flashcard must exist in the QuickCache."""
        self._quickcache.remove_flashcard(target)

    def add_flashcard(self, flashcard: Flashcard) -> None:
        """
        Add ``flashcard`` and reset the filter so the new card is visible.

        The flashcard must not already exist in the QuickCache.
        """
        self._quickcache.add_flashcard(flashcard)
        self.update_filtered_flashcard_list(PREDICATE_SHOW_ALL_FLASHCARDS)

    def set_flashcard(self, target: Flashcard, edited: Flashcard) -> None:
        self._quickcache.set_flashcard(target, edited)

    # --- Filtered flashcard list ---

    @property
    def filtered_flashcards(self) -> Tuple[Flashcard, ...]:
        """Read-only view of the flashcards matching the current filter."""
        return tuple(f for f in self._quickcache if self._predicate(f))

    @property
    def predicate(self) -> FlashcardFilter:
        return self._predicate

    def update_filtered_flashcard_list(self, predicate: FlashcardFilter) -> None:
        """Filter the displayed list with ``predicate``."""
        self._predicate = predicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._quickcache == other._quickcache
            and self._user_prefs == other._user_prefs
            and self.filtered_flashcards == other.filtered_flashcards
        )
