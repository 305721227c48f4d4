# src/spellcheck/engine.py
from __future__ import annotations

import logging
from typing import Callable, Optional, TextIO

from . import config as CFG
from .dictionary import Dictionary
from .highlight import Highlighter
from .line_store import LineStore
from .models import SessionReport
from .persist import Persister
from .session import CorrectionSession

log = logging.getLogger(__name__)


class SpellChecker:
    """
    Thin orchestration layer that glues together:
      - the text being checked (LineStore),
      - the word list (Dictionary: load -> validate -> sort),
      - the interactive pass (CorrectionSession),
      - the final backup + rewrite (Persister).

    Public API (used by the CLI):
      * load(text_path, dict_path): read both files, validate and sort the dictionary
      * check(...):                 run the correction session, return its report
      * save(...):                  back up the original and write the corrected text

    The dictionary is validated before any text line is scanned, and nothing on
    disk changes unless check() reaches the end of the document.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.text_path: Optional[str] = None
        self.lines: Optional[LineStore] = None
        self.dictionary: Optional[Dictionary] = None

    # /* ~~~ Read text + dictionary; dictionary must be valid before we go on ~~~ */
    def load(self, text_path: str, dict_path: Optional[str] = None) -> None:
        dict_path = dict_path or CFG.DEFAULT_DICTIONARY

        log.info("Loading text from %s", text_path)
        lines = LineStore.load(text_path)

        log.info("Loading dictionary from %s", dict_path)
        dictionary = Dictionary.load(dict_path)
        dictionary.validate()
        dictionary.sort()

        self.text_path = text_path
        self.lines = lines
        self.dictionary = dictionary
        log.info("SpellChecker load() complete: lines=%d words=%d", len(lines), len(dictionary))

    # ------------- checking -------------

    # /* ~~~ Walk the text and resolve every misspelling interactively ~~~ */
    def check(
        self,
        *,
        highlighter: Optional[Highlighter] = None,
        reader: Optional[Callable[[str], str]] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> SessionReport:
        if self.lines is None or self.dictionary is None:
            raise RuntimeError("SpellChecker not loaded. Call load() first.")
        session = CorrectionSession(
            self.lines, self.dictionary,
            highlighter=highlighter, reader=reader, out=out, err=err,
        )
        return session.run()

    # ------------- persistence -------------

    # /* ~~~ Back up the original and write the corrected lines in its place ~~~ */
    def save(self, *, overwrite_backup: bool = CFG.OVERWRITE_BACKUP,
             out: Optional[TextIO] = None) -> str:
        if self.lines is None or self.text_path is None:
            raise RuntimeError("SpellChecker not loaded. Call load() first.")
        bak = Persister(overwrite_backup=overwrite_backup, out=out).save(self.lines, self.text_path)
        log.info("SpellChecker save() complete: %s (backup %s)", self.text_path, bak)
        return bak
