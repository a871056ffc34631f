import logging
import re
from typing import Callable, Dict

from ..commands import (
    AddMultipleChoiceQuestionCommand,
    AddOpenEndedQuestionCommand,
    ClearCommand,
    ClearStatsCommand,
    Command,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    ExportCommand,
    FindCommand,
    HelpCommand,
    ImportCommand,
    ListCommand,
    OpenCommand,
    StatsCommand,
    TestCommand,
)
from ..exceptions import ParseError
from ..messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND
from . import command_parsers

logger = logging.getLogger(__name__)

# Used for initial separation of command word and args.
BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


def _no_arguments(command_class) -> Callable[[str], Command]:
    """Commands without arguments ignore anything typed after the word."""

    def parse(args: str) -> Command:
        return command_class()

    return parse


class QuickCacheParser:
    """
    Parses a line of user input into a Command.
    """

    def __init__(self) -> None:
        self._parsers: Dict[str, Callable[[str], Command]] = {
            AddOpenEndedQuestionCommand.COMMAND_WORD: command_parsers.parse_add_command,
            AddMultipleChoiceQuestionCommand.COMMAND_WORD: command_parsers.parse_add_mcq_command,
            OpenCommand.COMMAND_WORD: command_parsers.parse_open_command,
            EditCommand.COMMAND_WORD: command_parsers.parse_edit_command,
            DeleteCommand.COMMAND_WORD: command_parsers.parse_delete_command,
            FindCommand.COMMAND_WORD: command_parsers.parse_find_command,
            TestCommand.COMMAND_WORD: command_parsers.parse_test_command,
            StatsCommand.COMMAND_WORD: command_parsers.parse_stats_command,
            ClearStatsCommand.COMMAND_WORD: command_parsers.parse_clear_stats_command,
            ExportCommand.COMMAND_WORD: command_parsers.parse_export_command,
            ImportCommand.COMMAND_WORD: command_parsers.parse_import_command,
            ListCommand.COMMAND_WORD: _no_arguments(ListCommand),
            ClearCommand.COMMAND_WORD: _no_arguments(ClearCommand),
            HelpCommand.COMMAND_WORD: _no_arguments(HelpCommand),
            ExitCommand.COMMAND_WORD: _no_arguments(ExitCommand),
        }

    @property
    def command_words(self):
        return tuple(self._parsers)

    def parse_command(self, user_input: str) -> Command:
        """
        Parse ``user_input`` into a command for execution.

        Raises:
            ParseError: If the input is blank, names an unknown command, or
                does not conform to the command's format.
        """
        matcher = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if matcher is None:
            raise ParseError(
                MESSAGE_INVALID_COMMAND_FORMAT % HelpCommand.MESSAGE_USAGE
            )

        command_word = matcher.group("command_word")
        arguments = matcher.group("arguments")
        parse = self._parsers.get(command_word)
        if parse is None:
            logger.debug("Unknown command word: %s", command_word)
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)
        return parse(arguments)
