from typing import Optional


class QuickCacheError(Exception):
    """Base exception for QuickCache errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class ParseError(QuickCacheError):
    """Raised when user input does not conform to the expected format."""

    pass


class CommandError(QuickCacheError):
    """Raised when a well-formed command cannot be executed."""

    pass


class DataConversionError(QuickCacheError):
    """Indicates an error during data conversion between stored JSON/YAML
    and application models."""

    pass


class DuplicateFlashcardError(QuickCacheError):
    """Raised when an operation would result in duplicate flashcards."""

    def __init__(self, message: str = "Operation would result in duplicate flashcards"):
        super().__init__(message)


class FlashcardNotFoundError(QuickCacheError):
    """Raised when a flashcard expected in the QuickCache is absent."""

    def __init__(self, message: str = "Flashcard not found in the QuickCache"):
        super().__init__(message)
