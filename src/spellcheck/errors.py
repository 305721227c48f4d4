from __future__ import annotations
from . import config as CFG


class SpellcheckError(Exception):
    """Base for every fatal condition; the CLI turns it into an exit status."""
    exit_code: int = CFG.EXIT_FAILURE


class FileOpenError(SpellcheckError):
    """A text or dictionary file could not be opened, read or decoded."""
    def __init__(self, path: str) -> None:
        super().__init__(f"Can't open file: {path}")
        self.path = path


class DictionaryFormatError(SpellcheckError):
    """A dictionary entry is not a lowercase alphabetic word (line_number is 1-based)."""
    def __init__(self, line_number: int, entry: str = "") -> None:
        super().__init__(f"Invalid word, line: {line_number}")
        self.line_number = line_number
        self.entry = entry


class PersistenceError(SpellcheckError):
    """Backing up or rewriting the text file failed."""
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Can't write {path}: {reason}")
        self.path = path
        self.reason = reason


class UserQuit(SpellcheckError):
    exit_code = CFG.EXIT_USER_QUIT

    def __init__(self) -> None:
        super().__init__("Discarding changes")
