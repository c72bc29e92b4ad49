"""Single-pass helpers over (key, value) entries."""

from collections.abc import Callable, Collection, Iterable
from functools import reduce
from typing import Any, Hashable, Protocol, TypeVar

_K = TypeVar("_K")
_V = TypeVar("_V")
_I = TypeVar("_I", bound=Hashable)
_K_co = TypeVar("_K_co", covariant=True)
_V_co = TypeVar("_V_co", covariant=True)


class EntrySource(Protocol[_K_co, _V_co]):
    """Anything exposing dict-style entry views: a Mapping or a Dictionary."""

    def __contains__(self, key: object, /) -> bool: ...

    def keys(self) -> Iterable[_K_co]: ...

    def values(self) -> Iterable[_V_co]: ...

    def items(self) -> Iterable[tuple[_K_co, _V_co]]: ...


def group_entries(
    entries: Iterable[tuple[_K, _V]], identifier: Callable[[_V, _K], _I]
) -> dict[_I, dict[_K, _V]]:
    """Group (key, value) entries into buckets by a derived identifier.

    Buckets are created on first use and keep entries in their original
    relative order. Values are stored as given.

    Args:
        entries: An iterable of (key, value) tuples.
        identifier: Called as ``identifier(value, key)`` for every entry.

    Returns:
        A dict mapping each identifier to a dict of the entries that produced it.

    Example:
        >>> group_entries([("a", 1), ("b", 2), ("c", 1)], lambda v, k: v)
        {1: {'a': 1, 'c': 1}, 2: {'b': 2}}
    """

    def accumulate(
        groups: dict[_I, dict[_K, _V]], entry: tuple[_K, _V]
    ) -> dict[_I, dict[_K, _V]]:
        key, value = entry
        groups.setdefault(identifier(value, key), {})[key] = value
        return groups

    return reduce(accumulate, entries, {})


def split_entries(
    entries: Iterable[tuple[_K, _V]], predicate: Callable[[_V, _K], bool]
) -> tuple[dict[_K, _V], dict[_K, _V]]:
    """Split entries into those matching ``predicate`` and the rest.

    Every entry lands in exactly one of the two dicts.

    Example:
        >>> split_entries([("a", 1), ("b", 2)], lambda v, k: v > 1)
        ({'b': 2}, {'a': 1})
    """
    matched: dict[_K, _V] = {}
    unmatched: dict[_K, _V] = {}
    for key, value in entries:
        (matched if predicate(value, key) else unmatched)[key] = value
    return matched, unmatched


def value_membership(source: EntrySource[Any, Any]) -> Callable[[object], bool]:
    """Build an equality membership test over the values of a mapping or Dictionary.

    Values are put in a set when they are all hashable. Probing that set with an
    unhashable value, or holding unhashable values at all, falls back to a
    linear ``==`` scan.

    Example:
        >>> among = value_membership({"a": 1, "b": [2]})
        >>> among(1), among([2]), among(3)
        (True, True, False)
    """
    values = list(source.values())
    try:
        lookup: Collection[Any] = set(values)
    except TypeError:
        lookup = values

    def contains(value: object) -> bool:
        try:
            return value in lookup
        except TypeError:
            return any(existing == value for existing in values)

    return contains
