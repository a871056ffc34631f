"""User-facing messages shared across parsers and commands."""

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n%s"
MESSAGE_INVALID_FLASHCARD_DISPLAYED_INDEX = (
    "The flashcard index provided is invalid"
)
MESSAGE_FLASHCARDS_LISTED_OVERVIEW = "%d flashcards listed!"
MESSAGE_TOO_MANY_QUESTIONS = "Only one question is allowed per flashcard."
MESSAGE_ANSWER_NOT_IN_CHOICES = "The answer must match one of the choices"
MESSAGE_DUPLICATE_CHOICES = (
    "Choices of a multiple choice question must be unique"
)
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_OPTION = "The option provided is invalid"
MESSAGE_INVALID_FILE_NAME = (
    "File names cannot be blank or contain path separators"
)
