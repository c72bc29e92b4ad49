import pytest

from dictionary import Dictionary


@pytest.fixture
def letters() -> Dictionary[str, int]:
    return Dictionary({"a": 1, "b": 2, "c": 3})


@pytest.fixture
def with_duplicates() -> Dictionary[str, int]:
    """Entries where two keys share a value."""
    return Dictionary({"a": 1, "b": 2, "c": 3, "d": 1})


class CallRecorder:
    """Predicate wrapper that records every (value, key) it is called with."""

    def __init__(self, predicate) -> None:
        self._predicate = predicate
        self.calls: list[tuple[object, object]] = []

    def __call__(self, value, key):
        self.calls.append((value, key))
        return self._predicate(value, key)


@pytest.fixture
def recorder():
    return CallRecorder
