"""Custom exceptions for the i18n system.

Soft misses (unknown context or key) never raise; they degrade to the
bare key. These exceptions cover the hard failures only.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            translator.set_language("xx-XX")
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class StructuralError(I18nError, ValueError):
    """Raised when a catalog document does not have the expected shape.

    Attributes:
        key: Offending field key, if known.
        context: Key of the enclosing context, if any.
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        context: Optional[str] = None,
    ):
        super().__init__(message)
        self.key = key
        self.context = context


class LanguageNotFoundError(I18nError, KeyError):
    """Raised when a locale code is not registered with the translator.

    Example:
        >>> translator.set_language("xx-XX")
        Traceback (most recent call last):
        ...
        LanguageNotFoundError: 'Language not loaded: xx-XX'
    """

    def __init__(self, code: str):
        super().__init__(f"Language not loaded: {code}")
        self.code = code


class InvalidLanguageError(I18nError, ValueError):
    """Raised when a missing (None) catalog is registered."""

    pass


class BackupError(I18nError, OSError):
    """Raised when an existing catalog file cannot be moved to its backup."""

    pass
