"""
Interactive dictionary spell checker.

Scans a plain-text file for alphabetic words, looks each one up in a sorted
word list, and asks the operator what to do with every word it cannot find:
replace it, add it to the word list, skip it, or quit without saving. When the
whole file has been checked the original is moved to <file>.bak and the
corrected text is written in its place.

Example Usage:
    from spellcheck import SpellChecker

    checker = SpellChecker()
    checker.load("essay.txt", "words.txt")
    checker.check()
    checker.save()

Command line:
    python -m spellcheck essay.txt [words.txt]
"""

# src/spellcheck/__init__.py
from .dictionary import Dictionary, SortedWords
from .engine import SpellChecker
from .errors import (
    DictionaryFormatError,
    FileOpenError,
    PersistenceError,
    SpellcheckError,
    UserQuit,
)
from .line_store import LineStore
from .session import CorrectionSession

__version__ = "1.0.0"
__all__ = [
    "SpellChecker",
    "LineStore",
    "Dictionary",
    "SortedWords",
    "CorrectionSession",
    "SpellcheckError",
    "FileOpenError",
    "DictionaryFormatError",
    "PersistenceError",
    "UserQuit",
]
