"""
User preferences persisted between sessions.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    DEFAULT_QUICKCACHE_FILE,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
)


class GuiSettings(BaseModel):
    """
    Window geometry of the front end. Carried as plain data so that the
    preferences file stays compatible with graphical front ends.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    window_width: float = Field(default=DEFAULT_WINDOW_WIDTH, gt=0)
    window_height: float = Field(default=DEFAULT_WINDOW_HEIGHT, gt=0)
    window_x: Optional[int] = Field(default=None)
    window_y: Optional[int] = Field(default=None)


class UserPrefs(BaseModel):
    """
    Mutable user preferences: GUI settings and the QuickCache data file path.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    gui_settings: GuiSettings = Field(default_factory=GuiSettings)
    quickcache_file_path: Path = Field(
        default=DEFAULT_QUICKCACHE_FILE,
        description="Location of the QuickCache JSON data file.",
    )

    def reset_data(self, new_prefs: "UserPrefs") -> None:
        """Replace these preferences with a copy of ``new_prefs``."""
        self.gui_settings = new_prefs.gui_settings
        self.quickcache_file_path = new_prefs.quickcache_file_path
