from __future__ import annotations
import bisect
import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional

from .errors import DictionaryFormatError
from .loader import read_lines

log = logging.getLogger(__name__)


def _ordinal(s: str) -> str:
    # str comparison is already code-point order
    return s


class SortedWords:
    """
    List kept in ascending order of `key(item)` so lookups can bisect.

    Items may be appended in bulk while unsorted; the container remembers it is
    dirty and sorts once before the next lookup. `insert` on a sorted container
    is a sorted insertion and leaves it clean.
    """
    def __init__(self, items: Iterable[str] = (), *,
                 key: Optional[Callable[[str], Any]] = None) -> None:
        self._key: Callable[[str], Any] = key or _ordinal
        self._items: List[str] = list(items)
        self._sorted: bool = len(self._items) < 2

    @property
    def is_sorted(self) -> bool:
        return self._sorted

    def sort(self) -> None:
        if self._sorted:
            return
        self._items.sort(key=self._key)
        self._sorted = True

    def append(self, item: str) -> None:
        self._items.append(item)
        self._sorted = len(self._items) < 2

    def insert(self, item: str) -> None:
        if not self._sorted:
            self.append(item)
            return
        bisect.insort_left(self._items, item, key=self._key)

    def index(self, item: str) -> int:
        """Position of `item`, or -1 when absent."""
        self.sort()
        k = self._key(item)
        i = bisect.bisect_left(self._items, k, key=self._key)
        if i != len(self._items) and self._key(self._items[i]) == k:
            return i
        return -1

    def __contains__(self, item: object) -> bool:
        return isinstance(item, str) and self.index(item) >= 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)


def is_valid_entry(word: str) -> bool:
    """Non-empty, and every character is a lowercase letter (so no whitespace)."""
    return bool(word) and all(ch.isalpha() and ch.islower() for ch in word)


def validate(entries: Iterable[str]) -> None:
    """
    Check dictionary entries in file order.

    Raises DictionaryFormatError with the 1-based line number of the first
    entry that is empty or holds whitespace, an uppercase letter or any other
    non-lowercase-alphabetic character.
    """
    for line_number, entry in enumerate(entries, start=1):
        if not is_valid_entry(entry):
            raise DictionaryFormatError(line_number, entry)


class Dictionary:
    """
    Word list used for exact membership testing.

    Lifecycle: load -> validate -> sort -> contains/add. Lookup keys must be
    lowercase already; matching is exact and case-sensitive. The dictionary
    can grow during a session but never shrinks.
    """
    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._words = SortedWords(entries)

    @classmethod
    def load(cls, path: str) -> "Dictionary":
        return cls(read_lines(path))

    @property
    def entries(self) -> List[str]:
        return list(self._words)

    def validate(self) -> None:
        validate(self._words)
        log.info("Dictionary valid: %d entries", len(self._words))

    def sort(self) -> None:
        self._words.sort()

    def contains(self, word: str) -> bool:
        return word in self._words

    def add(self, word: str) -> None:
        if not is_valid_entry(word):
            raise ValueError(f"not a lowercase alphabetic word: {word!r}")
        if word in self._words:
            return
        self._words.insert(word)
        log.info("Added %r to dictionary (%d entries)", word, len(self._words))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)
