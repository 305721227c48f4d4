from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

from .models import Word


def _is_word_char(ch: str) -> bool:
    """Letters only. Digits, punctuation and whitespace separate words."""
    return ch.isalpha()


def next_word(line: str, pos: int = 0, line_no: int = 0) -> Optional[Tuple[Word, int]]:
    """
    Find the next word in `line` at or after `pos`.

    Skips any run of non-alphabetic characters, then takes the maximal run of
    alphabetic characters that follows. Returns (word, next_pos) where next_pos
    is the offset just past the run, or None when the line is exhausted.
    """
    n = len(line)
    i = max(0, pos)
    while i < n and not _is_word_char(line[i]):
        i += 1
    if i >= n:
        return None
    start = i
    while i < n and _is_word_char(line[i]):
        i += 1
    return Word(line_no=line_no, start=start, text=line[start:i]), i


def iter_words(line: str, start: int = 0, line_no: int = 0) -> Iterator[Word]:
    """Lazily yield every word of `line` from `start` on, left to right."""
    pos = start
    while True:
        found = next_word(line, pos, line_no)
        if found is None:
            return
        word, pos = found
        yield word


def split_runs(line: str) -> List[Tuple[bool, str]]:
    """
    Split `line` into alternating (is_word, text) runs.

    Joining the texts in order gives back `line` exactly.
    """
    runs: List[Tuple[bool, str]] = []
    pos = 0
    for word in iter_words(line):
        if word.start > pos:
            runs.append((False, line[pos:word.start]))
        runs.append((True, word.text))
        pos = word.end
    if pos < len(line):
        runs.append((False, line[pos:]))
    return runs


def fold(word: str) -> str:
    """Lookup key for a word: a lowercase copy."""
    return word.lower()
