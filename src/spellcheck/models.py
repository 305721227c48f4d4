# src/spellcheck/models.py
"""
Data models for the spell checker.

- Word: a transient view of one alphabetic run inside a text line.
- SessionState: the four states of the correction state machine.
- SessionReport: what a finished session did, for logging and the CLI.

These classes carry no behavior beyond trivial derived fields; tokenizing,
lookup and correction live in their own modules.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Word:
    """
    One token produced by the tokenizer.

    Attributes
    ----------
    line_no : int
        0-based index of the line the word was found in.
    start : int
        Offset of the first character of the word in that line.
    text : str
        The word exactly as it appears in the line (original casing).
    """
    line_no: int
    start: int
    text: str

    @property
    def end(self) -> int:
        return self.start + len(self.text)


class SessionState(Enum):
    SCANNING = "scanning"
    MISSPELLED_PROMPT = "misspelled_prompt"
    DONE = "done"
    ABORTED = "aborted"


@dataclass
class SessionReport:
    checked: int = 0
    misspelled: int = 0
    skipped: int = 0
    added: int = 0
    replaced: int = 0

    @property
    def changed(self) -> bool:
        return self.replaced > 0
