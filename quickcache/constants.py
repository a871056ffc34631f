"""
Command words, argument prefixes and default file locations.

Pure constants only. Runtime overrides come from the CLI options and their
environment variables.
"""
from pathlib import Path
from typing import Tuple

# Command words understood by QuickCacheParser
ADD_COMMAND_WORD = "add"
ADD_MCQ_COMMAND_WORD = "addmcq"
OPEN_COMMAND_WORD = "open"
EDIT_COMMAND_WORD = "edit"
DELETE_COMMAND_WORD = "delete"
FIND_COMMAND_WORD = "find"
LIST_COMMAND_WORD = "list"
CLEAR_COMMAND_WORD = "clear"
TEST_COMMAND_WORD = "test"
STATS_COMMAND_WORD = "stats"
CLEAR_STATS_COMMAND_WORD = "clearstats"
EXPORT_COMMAND_WORD = "export"
IMPORT_COMMAND_WORD = "import"
HELP_COMMAND_WORD = "help"
EXIT_COMMAND_WORD = "exit"

# Default locations, relative to the working directory
DEFAULT_PREFS_FILE: Path = Path("preferences.json")
DEFAULT_QUICKCACHE_FILE: Path = Path("data") / "quickcache.json"

# Environment variables consulted by the CLI
PREFS_ENVVAR = "QUICKCACHE_PREFS"
DATA_ENVVAR = "QUICKCACHE_DATA"

# File suffixes accepted by the import command
JSON_SUFFIXES: Tuple[str, ...] = (".json",)
YAML_SUFFIXES: Tuple[str, ...] = (".yaml", ".yml")

# Default window geometry persisted with the user preferences
DEFAULT_WINDOW_WIDTH: float = 740.0
DEFAULT_WINDOW_HEIGHT: float = 600.0
