# src/spellcheck/line_store.py
from __future__ import annotations
import logging
from typing import Iterable, Iterator, List, Optional, TextIO

from .config import ENCODING, WRITE_ERRORS
from .loader import read_lines

log = logging.getLogger(__name__)


class LineStore:
    """Ordered, mutable text lines of the document being checked (0-based)."""

    def __init__(self, lines: Optional[Iterable[str]] = None) -> None:
        self._lines: List[str] = list(lines) if lines is not None else []

    @classmethod
    def load(cls, path: str) -> "LineStore":
        return cls(read_lines(path))

    # R
    def get(self, i: int) -> str:
        return self._lines[self._check(i)]

    @property
    def count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    # U
    def set(self, i: int, text: str) -> None:
        self._lines[self._check(i)] = text

    def replace(self, i: int, start: int, end: int, text: str) -> str:
        """Splice `text` over [start, end) of line i and return the new line."""
        line = self.get(i)
        if not 0 <= start <= end <= len(line):
            raise IndexError(f"span [{start}, {end}) outside line {i} (length {len(line)})")
        new = line[:start] + text + line[end:]
        self._lines[i] = new
        return new

    # persist
    def persist(self, path: str) -> None:
        """Write every line followed by a single newline, overwriting `path`."""
        with open(path, "w", encoding=ENCODING, errors=WRITE_ERRORS, newline="\n") as f:
            self.dump(f)
        log.info("Wrote %d lines to %s", len(self._lines), path)

    def dump(self, f: TextIO) -> None:
        for line in self._lines:
            f.write(line)
            f.write("\n")

    def _check(self, i: int) -> int:
        if not 0 <= i < len(self._lines):
            raise IndexError(f"line index {i} out of range (0..{len(self._lines) - 1})")
        return i
