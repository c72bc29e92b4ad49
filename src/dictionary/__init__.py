from dictionary.core import Dictionary, EntryPredicate
from dictionary.option import Option, Some, Nothing, present, absent, is_some, is_nothing
from dictionary.exceptions import DictionaryError, UnwrapError, MissingKeyError
from dictionary._version import __version__

__all__ = [
    "Dictionary",
    "EntryPredicate",
    "Option",
    "Some",
    "Nothing",
    "present",
    "absent",
    "is_some",
    "is_nothing",
    "DictionaryError",
    "UnwrapError",
    "MissingKeyError",
    "__version__",
]
