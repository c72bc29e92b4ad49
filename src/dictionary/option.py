"""Optional values for lookups that may fail.

An Option is either ``Some(value)`` when a value is present or ``Nothing()``
when it is absent. Dictionary lookups return options instead of raising
KeyError or returning None, so a missing key is an ordinary value the caller
has to deal with.

Example::

    match scores.get("alice"):
        case Some(score):
            print(f"alice scored {score}")
        case Nothing():
            print("alice has no score yet")

    scores.get("bob").get_or_else(0)
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typing_extensions import TypeIs

from dictionary.exceptions import UnwrapError

_T = TypeVar("_T")
_R = TypeVar("_R")


def resolve_alternative(alternative: _T | Callable[[], _T]) -> _T:
    """Return ``alternative``, calling it first if it is a zero-argument producer."""
    return alternative() if callable(alternative) else alternative


class Option(ABC, Generic[_T]):
    """Common interface of ``Some`` and ``Nothing``."""

    __slots__ = ()

    @abstractmethod
    def is_present(self) -> bool:
        """Return True if this option holds a value."""
        ...

    def is_absent(self) -> bool:
        return not self.is_present()

    @abstractmethod
    def get_or_else(self, alternative: _T | Callable[[], _T]) -> _T:
        """Return the held value, or ``alternative`` if absent.

        Args:
            alternative: A fallback value, or a zero-argument callable producing
                one. A callable is only invoked when the option is absent.

        Returns:
            The held value or the resolved alternative.
        """
        ...

    @abstractmethod
    def unwrap(self) -> _T:
        """Return the held value.

        The option must be present. Calling this on ``Nothing`` raises
        UnwrapError rather than returning a placeholder.

        Raises:
            UnwrapError: If the option is absent.
        """
        ...

    @abstractmethod
    def map(self, fn: Callable[[_T], _R]) -> "Option[_R]":
        """Apply ``fn`` to the held value, keeping absence as is."""
        ...

    @abstractmethod
    def __iter__(self) -> Iterator[_T]: ...


@dataclass(slots=True, frozen=True, repr=False)
class Some(Option[_T]):
    """A present value."""

    value: _T

    def is_present(self) -> bool:
        return True

    def get_or_else(self, alternative: _T | Callable[[], _T]) -> _T:
        return self.value

    def unwrap(self) -> _T:
        return self.value

    def map(self, fn: Callable[[_T], _R]) -> Option[_R]:
        return Some(fn(self.value))

    def __iter__(self) -> Iterator[_T]:
        yield self.value

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(slots=True, frozen=True, repr=False)
class Nothing(Option[_T]):
    """An absent value. All instances compare equal."""

    def is_present(self) -> bool:
        return False

    def get_or_else(self, alternative: _T | Callable[[], _T]) -> _T:
        return resolve_alternative(alternative)

    def unwrap(self) -> _T:
        raise UnwrapError()

    def map(self, fn: Callable[[_T], _R]) -> Option[_R]:
        return Nothing()

    def __iter__(self) -> Iterator[_T]:
        return iter(())

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nothing()"


def present(value: _T) -> Option[_T]:
    return Some(value)


def absent() -> Option[Any]:
    return Nothing()


def is_some(option: Option[_T]) -> TypeIs[Some[_T]]:
    """Narrow ``option`` to ``Some`` so ``unwrap()`` is known to be safe."""
    return isinstance(option, Some)


def is_nothing(option: Option[_T]) -> TypeIs[Nothing[_T]]:
    return isinstance(option, Nothing)
