"""
One parse function per command. Each receives the text that follows the
command word (usually starting with a space) and returns the command.
"""

from typing import List, Optional, Union

from ..commands import (
    AddMultipleChoiceQuestionCommand,
    AddOpenEndedQuestionCommand,
    ClearStatsCommand,
    DeleteByTagCommand,
    DeleteCommand,
    EditCommand,
    EditFlashcardDescriptor,
    ExportCommand,
    FindCommand,
    ImportCommand,
    OpenCommand,
    StatsCommand,
    TestCommand,
)
from ..constants import YAML_SUFFIXES
from ..exceptions import ParseError
from ..messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_TOO_MANY_QUESTIONS
from ..models import Difficulty, Flashcard
from ..predicates import (
    AllOfPredicate,
    DifficultyIsPredicate,
    FlashcardContainsTagPredicate,
    FlashcardPredicate,
    QuestionContainsKeywordsPredicate,
)
from .parser_utils import (
    parse_answer,
    parse_choices,
    parse_difficulty,
    parse_file_name,
    parse_index,
    parse_multiple_choice_answer,
    parse_option,
    parse_question,
    parse_tags,
)
from .tokenizer import (
    PREFIX_ANSWER,
    PREFIX_CHOICE,
    PREFIX_DIFFICULTY,
    PREFIX_OPTION,
    PREFIX_QUESTION,
    PREFIX_TAG,
    ArgumentMultimap,
    tokenize,
)


def _invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT % usage)


def _single_question(argmap: ArgumentMultimap) -> str:
    questions = argmap.get_all_values(PREFIX_QUESTION)
    if len(questions) > 1:
        raise ParseError(MESSAGE_TOO_MANY_QUESTIONS)
    return parse_question(questions[0])


def _optional_difficulty(argmap: ArgumentMultimap) -> Difficulty:
    difficulty = argmap.get_value(PREFIX_DIFFICULTY)
    if difficulty is None:
        return Difficulty.UNSPECIFIED
    return parse_difficulty(difficulty)


def _parse_preamble_index(preamble: str, usage: str) -> int:
    """A preamble that is not an index is a format error, not an index error."""
    if not preamble:
        raise _invalid_format(usage)
    try:
        return parse_index(preamble)
    except ParseError as e:
        raise _invalid_format(usage) from e


def parse_add_command(args: str) -> AddOpenEndedQuestionCommand:
    """
    Parse ``q/QUESTION a/ANSWER [d/DIFFICULTY] [t/TAG]...``.

    Raises:
        ParseError: If a required prefix is missing, a preamble is present, or
            a field is invalid (only the first invalid field is reported).
    """
    usage = AddOpenEndedQuestionCommand.MESSAGE_USAGE
    argmap = tokenize(
        args, PREFIX_QUESTION, PREFIX_ANSWER, PREFIX_DIFFICULTY, PREFIX_TAG
    )
    if (
        not argmap.are_prefixes_present(PREFIX_QUESTION, PREFIX_ANSWER)
        or argmap.get_preamble()
    ):
        raise _invalid_format(usage)

    question = _single_question(argmap)
    answer = parse_answer(argmap.get_value(PREFIX_ANSWER))
    difficulty = _optional_difficulty(argmap)
    tags = parse_tags(argmap.get_all_values(PREFIX_TAG))

    return AddOpenEndedQuestionCommand(
        Flashcard(
            question=question, answer=answer, tags=tags, difficulty=difficulty
        )
    )


def parse_add_mcq_command(args: str) -> AddMultipleChoiceQuestionCommand:
    """
    Parse ``q/QUESTION a/ANSWER c/CHOICE [c/CHOICE]... [d/DIFFICULTY] [t/TAG]...``.

    The answer is either the text or the 1-based number of a choice.
    """
    usage = AddMultipleChoiceQuestionCommand.MESSAGE_USAGE
    argmap = tokenize(
        args,
        PREFIX_QUESTION,
        PREFIX_ANSWER,
        PREFIX_CHOICE,
        PREFIX_DIFFICULTY,
        PREFIX_TAG,
    )
    if (
        not argmap.are_prefixes_present(
            PREFIX_QUESTION, PREFIX_ANSWER, PREFIX_CHOICE
        )
        or argmap.get_preamble()
    ):
        raise _invalid_format(usage)

    question = _single_question(argmap)
    raw_answer = argmap.get_value(PREFIX_ANSWER)
    parse_answer(raw_answer)
    choices = parse_choices(argmap.get_all_values(PREFIX_CHOICE))
    answer = parse_multiple_choice_answer(raw_answer, choices)
    difficulty = _optional_difficulty(argmap)
    tags = parse_tags(argmap.get_all_values(PREFIX_TAG))

    return AddMultipleChoiceQuestionCommand(
        Flashcard(
            question=question,
            answer=answer,
            choices=choices,
            tags=tags,
            difficulty=difficulty,
        )
    )


def _parse_tags_for_edit(tags: List[str]):
    """
    Parse tags into a set if ``tags`` is non-empty. A single empty ``t/``
    parses into an empty set, which clears the tags.
    """
    if not tags:
        return None
    if len(tags) == 1 and tags[0] == "":
        return frozenset()
    return parse_tags(tags)


def parse_edit_command(args: str) -> EditCommand:
    """Parse ``INDEX [q/QUESTION] [a/ANSWER] [c/CHOICE]... [d/DIFFICULTY] [t/TAG]...``."""
    usage = EditCommand.MESSAGE_USAGE
    argmap = tokenize(
        args,
        PREFIX_QUESTION,
        PREFIX_ANSWER,
        PREFIX_CHOICE,
        PREFIX_DIFFICULTY,
        PREFIX_TAG,
    )
    index = _parse_preamble_index(argmap.get_preamble(), usage)

    question: Optional[str] = None
    if argmap.get_all_values(PREFIX_QUESTION):
        question = _single_question(argmap)
    answer = argmap.get_value(PREFIX_ANSWER)
    if answer is not None:
        answer = parse_answer(answer)
    choice_values = argmap.get_all_values(PREFIX_CHOICE)
    choices = parse_choices(choice_values) if choice_values else None
    difficulty_value = argmap.get_value(PREFIX_DIFFICULTY)
    difficulty = (
        parse_difficulty(difficulty_value)
        if difficulty_value is not None
        else None
    )
    tags = _parse_tags_for_edit(argmap.get_all_values(PREFIX_TAG))

    descriptor = EditFlashcardDescriptor(
        question=question,
        answer=answer,
        choices=choices,
        tags=tags,
        difficulty=difficulty,
    )
    if not descriptor.is_any_field_edited():
        raise ParseError(EditCommand.MESSAGE_NOT_EDITED)
    return EditCommand(index, descriptor)


def parse_delete_command(args: str) -> Union[DeleteCommand, DeleteByTagCommand]:
    """Parse ``INDEX`` or ``t/TAG [t/TAG]...``."""
    usage = DeleteCommand.MESSAGE_USAGE
    argmap = tokenize(args, PREFIX_TAG)
    tags = argmap.get_all_values(PREFIX_TAG)

    if tags:
        if argmap.get_preamble():
            raise _invalid_format(usage)
        return DeleteByTagCommand(
            FlashcardContainsTagPredicate(parse_tags(tags))
        )
    return DeleteCommand(_parse_preamble_index(argmap.get_preamble(), usage))


def parse_find_command(args: str) -> FindCommand:
    """
    Parse ``[q/KEYWORDS] [t/TAG]... [d/DIFFICULTY]...``; at least one
    criterion is required and all of them must hold.
    """
    usage = FindCommand.MESSAGE_USAGE
    argmap = tokenize(args, PREFIX_QUESTION, PREFIX_TAG, PREFIX_DIFFICULTY)
    if argmap.get_preamble():
        raise _invalid_format(usage)

    predicates: List[FlashcardPredicate] = []
    keyword_values = argmap.get_all_values(PREFIX_QUESTION)
    if keyword_values:
        keywords = [word for value in keyword_values for word in value.split()]
        if not keywords:
            raise _invalid_format(usage)
        predicates.append(QuestionContainsKeywordsPredicate(keywords))

    tags = argmap.get_all_values(PREFIX_TAG)
    if tags:
        predicates.append(FlashcardContainsTagPredicate(parse_tags(tags)))

    difficulties = argmap.get_all_values(PREFIX_DIFFICULTY)
    if difficulties:
        predicates.append(
            DifficultyIsPredicate(parse_difficulty(d) for d in difficulties)
        )

    if not predicates:
        raise _invalid_format(usage)
    return FindCommand(AllOfPredicate(predicates))


def parse_open_command(args: str) -> OpenCommand:
    return OpenCommand(
        _parse_preamble_index(args.strip(), OpenCommand.MESSAGE_USAGE)
    )


def parse_test_command(args: str) -> TestCommand:
    """Parse ``INDEX a/ANSWER`` or ``INDEX o/OPTION``."""
    usage = TestCommand.MESSAGE_USAGE
    argmap = tokenize(args, PREFIX_ANSWER, PREFIX_OPTION)
    index = _parse_preamble_index(argmap.get_preamble(), usage)

    answer = argmap.get_value(PREFIX_ANSWER)
    option = argmap.get_value(PREFIX_OPTION)
    if (answer is None) == (option is None):
        raise _invalid_format(usage)
    if answer is not None:
        return TestCommand(index, answer=parse_answer(answer))
    return TestCommand(index, option=parse_option(option))


def parse_stats_command(args: str) -> StatsCommand:
    if not args.strip():
        return StatsCommand()
    return StatsCommand(
        _parse_preamble_index(args.strip(), StatsCommand.MESSAGE_USAGE)
    )


def parse_clear_stats_command(args: str) -> ClearStatsCommand:
    return ClearStatsCommand(
        _parse_preamble_index(args.strip(), ClearStatsCommand.MESSAGE_USAGE)
    )


def parse_export_command(args: str) -> ExportCommand:
    """Exports are always JSON, so YAML file names are refused."""
    if not args.strip():
        raise _invalid_format(ExportCommand.MESSAGE_USAGE)
    file_name = parse_file_name(args)
    if file_name.lower().endswith(YAML_SUFFIXES):
        raise ParseError(ExportCommand.MESSAGE_YAML_FILE_NAME)
    return ExportCommand(file_name)


def parse_import_command(args: str) -> ImportCommand:
    if not args.strip():
        raise _invalid_format(ImportCommand.MESSAGE_USAGE)
    return ImportCommand(parse_file_name(args))
