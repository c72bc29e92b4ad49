"""Insertion-ordered key/value container with optional lookups.

``Dictionary`` wraps a plain ``dict`` and layers two things on top of it:

- Lookups return an ``Option`` instead of raising KeyError, so ``d[key]`` is
  ``Some(value)`` or ``Nothing()``.
- Set-style combinators (partition, group_by, difference, intersection, merge)
  build new containers in a single pass and never touch their inputs.

Example::

    prices = Dictionary({"apple": 3, "pear": 5, "plum": 3})

    prices["apple"]                      # Some(3)
    prices["kiwi"].get_or_else(0)        # 0
    cheap, dear = prices.partition(lambda price, name: price < 4)
    by_price = prices.group_by(lambda price, name: price)
    # Dictionary({3: Dictionary({'apple': 3, 'plum': 3}), 5: Dictionary({'pear': 5})})
"""

from collections.abc import (
    Callable,
    Collection,
    ItemsView,
    Iterable,
    Iterator,
    KeysView,
    Mapping,
    ValuesView,
)
from logging import getLogger
from typing import Any, Generic, Hashable, Self, TypeVar

from dictionary.exceptions import MissingKeyError
from dictionary.option import Nothing, Option, Some, resolve_alternative
from dictionary.utils.collections import (
    EntrySource,
    group_entries,
    split_entries,
    value_membership,
)

_K = TypeVar("_K", bound=Hashable)
_V = TypeVar("_V")
_I = TypeVar("_I", bound=Hashable)

#: Predicate over an entry, called as ``predicate(value, key)``
EntryPredicate = Callable[[_V, _K], bool]

logger = getLogger(__name__)


class Dictionary(Collection[_K], Generic[_K, _V]):
    """A key/value container whose lookups return options.

    Entries keep insertion order. Membership and lookup always agree:
    ``key in d`` is True exactly when ``d[key]`` is ``Some``.

    Note that ``dict(d)`` goes through ``d[key]`` and so yields options as
    values; use ``d.to_dict()`` to get the raw entries.

    Attributes:
        _entries: The underlying insertion-ordered dict.
    """

    __slots__ = ("_entries",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self, data: "EntrySource[_K, _V] | Iterable[tuple[_K, _V]] | None" = None
    ) -> None:
        self._entries: dict[_K, _V] = _copy_entries(data) if data is not None else {}

    @classmethod
    def from_mapping(cls, other: EntrySource[_K, _V]) -> Self:
        """Create a Dictionary holding a shallow copy of ``other``'s entries.

        Keys are copied; values are shared with ``other``.
        """
        return cls(other)

    # --- Lookup ---

    def __getitem__(self, key: _K) -> Option[_V]:
        return self.get(key)

    def get(self, key: _K) -> Option[_V]:
        """Look up ``key``.

        Returns:
            ``Some(value)`` if the key is present, ``Nothing()`` otherwise.
        """
        if key in self._entries:
            return Some(self._entries[key])
        return Nothing()

    def get_or_else(self, key: _K, alternative: _V | Callable[[], _V]) -> _V:
        """Return the value for ``key``, or ``alternative`` if it's missing.

        Args:
            key: The key to look up.
            alternative: A fallback value, or a zero-argument callable that
                produces one. The callable is only invoked when ``key`` is absent.

        Returns:
            The stored value or the resolved alternative.
        """
        if key in self._entries:
            return self._entries[key]
        return resolve_alternative(alternative)

    def find_key(self, predicate: EntryPredicate[_V, _K]) -> Option[_K]:
        """Return the key of the first entry satisfying ``predicate``.

        Entries are tested in insertion order and the scan stops at the first
        match.
        """
        for key, value in self._entries.items():
            if predicate(value, key):
                return Some(key)
        return Nothing()

    def find_value(self, predicate: EntryPredicate[_V, _K]) -> Option[_V]:
        """Return the value of the first entry satisfying ``predicate``."""
        for key, value in self._entries.items():
            if predicate(value, key):
                return Some(value)
        return Nothing()

    def contains_key(self, key: object) -> bool:
        return key in self._entries

    def contains_value(self, value: object) -> bool:
        return any(existing == value for existing in self._entries.values())

    # --- Combinators ---

    def partition(self, predicate: EntryPredicate[_V, _K]) -> tuple[Self, Self]:
        """Split entries by ``predicate``.

        Returns:
            A ``(matched, unmatched)`` pair. Every entry appears in exactly one
            of the two.
        """
        matched, unmatched = split_entries(self._entries.items(), predicate)
        return self._derive(matched), self._derive(unmatched)

    def group_by(self, identifier: Callable[[_V, _K], _I]) -> "Dictionary[_I, Self]":
        """Bucket entries by the identifier each one produces.

        Args:
            identifier: Called as ``identifier(value, key)``. Entries producing
                equal identifiers share a bucket.

        Returns:
            A Dictionary from identifier to a Dictionary of the entries in that
            bucket, in their original relative order.
        """
        groups = group_entries(self._entries.items(), identifier)
        logger.debug("Grouped %d entries into %d buckets", len(self._entries), len(groups))
        return Dictionary({id_: self._derive(bucket) for id_, bucket in groups.items()})

    def difference_by_key(self, other: EntrySource[Any, Any]) -> Self:
        """Return entries whose key is not present in ``other``."""
        return self._derive({k: v for k, v in self._entries.items() if k not in other})

    def difference_by_value(self, other: EntrySource[Any, Any]) -> Self:
        """Return entries whose value equals none of ``other``'s values."""
        excluded = value_membership(other)
        return self._derive({k: v for k, v in self._entries.items() if not excluded(v)})

    def intersection_by_key(self, other: EntrySource[Any, Any]) -> Self:
        """Return entries whose key is present in ``other``."""
        return self._derive({k: v for k, v in self._entries.items() if k in other})

    def intersection_by_value(self, other: EntrySource[Any, Any]) -> Self:
        """Return entries whose value equals one of ``other``'s values."""
        included = value_membership(other)
        return self._derive({k: v for k, v in self._entries.items() if included(v)})

    def merge(self, other: EntrySource[_K, _V]) -> Self:
        """Return a copy of this Dictionary overlaid with ``other``.

        Keys only in this Dictionary are kept, keys only in ``other`` are added,
        and on a collision ``other``'s value wins.
        """
        merged = dict(self._entries)
        merged.update(other.items())
        logger.debug("Merged over %d entries, result has %d", len(self._entries), len(merged))
        return self._derive(merged)

    def __or__(self, other: object) -> Self:
        if not isinstance(other, (Dictionary, Mapping)):
            return NotImplemented
        return self.merge(other)

    def __ror__(self, other: object) -> "Dictionary[Any, Any]":
        if not isinstance(other, Mapping):
            return NotImplemented
        return Dictionary(other).merge(self)

    def __sub__(self, other: object) -> Self:
        if not isinstance(other, (Dictionary, Mapping)):
            return NotImplemented
        return self.difference_by_key(other)

    def __and__(self, other: object) -> Self:
        if not isinstance(other, (Dictionary, Mapping)):
            return NotImplemented
        return self.intersection_by_key(other)

    # --- Mutation ---

    def __setitem__(self, key: _K, value: _V) -> None:
        self._entries[key] = value

    def insert(self, key: _K, value: _V) -> None:
        self._entries[key] = value

    def __delitem__(self, key: _K) -> None:
        try:
            del self._entries[key]
        except KeyError:
            raise MissingKeyError(key) from None

    def remove(self, key: _K) -> Option[_V]:
        """Remove ``key`` and return its value, or ``Nothing()`` if it was absent."""
        if key in self._entries:
            return Some(self._entries.pop(key))
        return Nothing()

    def update(self, other: "EntrySource[_K, _V] | Iterable[tuple[_K, _V]]") -> None:
        self._entries.update(_copy_entries(other))

    def clear(self) -> None:
        self._entries.clear()

    # --- Views and protocol methods ---

    def keys(self) -> KeysView[_K]:
        return self._entries.keys()

    def values(self) -> ValuesView[_V]:
        return self._entries.values()

    def items(self) -> ItemsView[_K, _V]:
        return self._entries.items()

    def copy(self) -> Self:
        return self._derive(dict(self._entries))

    def to_dict(self) -> dict[_K, _V]:
        return dict(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[_K]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Dictionary):
            return self._entries == other._entries
        if isinstance(other, Mapping):
            return self._entries == dict(other.items())
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"

    def _derive(self, entries: dict[_K, _V]) -> Self:
        """Wrap freshly built ``entries`` without copying them again."""
        derived = type(self).__new__(type(self))
        derived._entries = entries
        return derived


def _copy_entries(data: Any) -> dict[Any, Any]:
    """Shallow-copy ``data`` into a plain dict.

    A Dictionary's ``__getitem__`` returns options, so its entries are read
    through ``items()`` rather than handed to ``dict()`` directly.
    """
    if hasattr(data, "items"):
        return dict(data.items())
    return dict(data)
