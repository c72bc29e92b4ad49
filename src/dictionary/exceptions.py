"""Exceptions raised by dictionary containers and options.

Key absence is never an error here: lookups return ``Nothing`` instead. The
exceptions below cover precondition violations only, such as unwrapping an
absent option or deleting a key that isn't present.
"""

from typing import Any


class DictionaryError(Exception):
    """Base exception for dictionary and option failures.

    Attributes:
        message: Human-readable description of the failure.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class UnwrapError(DictionaryError):
    """Raised when ``unwrap()`` is called on an absent option.

    Callers should check ``is_present()`` (or match on ``Some``) first.
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Called unwrap() on an absent option")


class MissingKeyError(DictionaryError, KeyError):
    """Raised when deleting a key that isn't present.

    Subclasses KeyError so code written against plain dicts keeps working.

    Attributes:
        key: The key that was not found.
    """

    def __init__(self, key: Any, message: str | None = None) -> None:
        self.key = key
        super().__init__(message or f"Key not found: {key!r}")
