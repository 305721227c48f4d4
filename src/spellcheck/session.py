# src/spellcheck/session.py
"""
Interactive correction of misspelled words.

CorrectionSession walks the document word by word and stops at every word the
dictionary does not contain. At each stop the operator chooses:

    r  replace the word with text typed after the command (or on the next line)
    a  add the word to the dictionary for the rest of the run
    n  leave the word and move on
    q  quit, discarding every change

The walk is an explicit state machine (SessionState): SCANNING advances the
tokenizer, MISSPELLED_PROMPT shows context and reads one command, and the run
ends in DONE or ABORTED. An unknown command re-enters MISSPELLED_PROMPT
without moving. End of input at a prompt counts as quit.

Nothing here touches the file on disk; persistence happens only after DONE.
"""

from __future__ import annotations
import logging
import sys
from typing import Callable, Optional, TextIO

from . import config as CFG
from .dictionary import Dictionary, is_valid_entry
from .errors import UserQuit
from .highlight import Highlighter, PlainHighlighter
from .line_store import LineStore
from .models import SessionReport, SessionState, Word
from .tokenizer import fold, next_word

log = logging.getLogger(__name__)


class CorrectionSession:
    def __init__(
        self,
        lines: LineStore,
        dictionary: Dictionary,
        *,
        highlighter: Optional[Highlighter] = None,
        reader: Optional[Callable[[str], str]] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self.lines = lines
        self.dictionary = dictionary
        self.highlighter: Highlighter = highlighter or PlainHighlighter()
        self._read = reader or input
        self._out = out
        self._err = err

        self.state = SessionState.SCANNING
        self.line_no = 0
        self.pos = 0
        self.word: Optional[Word] = None
        self.report = SessionReport()

    # ------------- driving -------------

    def run(self) -> SessionReport:
        """Step until DONE and return the report; raise UserQuit if aborted."""
        while self.state not in (SessionState.DONE, SessionState.ABORTED):
            self.step()
        if self.state is SessionState.ABORTED:
            raise UserQuit()
        log.info(
            "Session done: checked=%d misspelled=%d skipped=%d added=%d replaced=%d",
            self.report.checked, self.report.misspelled, self.report.skipped,
            self.report.added, self.report.replaced,
        )
        return self.report

    def step(self) -> SessionState:
        """Perform one transition and return the new state."""
        if self.state is SessionState.SCANNING:
            self._scan()
        elif self.state is SessionState.MISSPELLED_PROMPT:
            self._prompt()
        return self.state

    # ------------- states -------------

    def _scan(self) -> None:
        if self.line_no >= len(self.lines):
            self.state = SessionState.DONE
            return
        found = next_word(self.lines.get(self.line_no), self.pos, self.line_no)
        if found is None:
            self.line_no += 1
            self.pos = 0
            return
        word, self.pos = found
        self.report.checked += 1
        if self.dictionary.contains(fold(word.text)):
            return
        self.word = word
        self.report.misspelled += 1
        self.state = SessionState.MISSPELLED_PROMPT

    def _prompt(self) -> None:
        word = self.word
        if word is None:
            raise RuntimeError("No misspelled word to prompt for.")
        self._show_context(word)
        try:
            raw = self._read(CFG.PROMPT)
        except EOFError:
            self._print()
            self._abort()
            return

        stripped = raw.lstrip()
        cmd = stripped[:1].lower()

        if cmd == CFG.CMD_QUIT:
            self._abort()
        elif cmd == CFG.CMD_NEXT:
            self.report.skipped += 1
            log.info("Skipped %r at line %d", word.text, word.line_no + 1)
            self._resume()
        elif cmd == CFG.CMD_ADD:
            if not is_valid_entry(fold(word.text)):
                # caseless letters (CJK, Hebrew, ...) fail islower()
                self._print(f"Can't add {word.text}: dictionary words must be lowercase letters")
                return
            self.dictionary.add(fold(word.text))
            self.report.added += 1
            self._resume()
        elif cmd == CFG.CMD_REPLACE:
            replacement = self._replacement(stripped[1:])
            if replacement is None:
                self._abort()
                return
            self.lines.replace(word.line_no, word.start, word.end, replacement)
            self.report.replaced += 1
            log.info("Replaced %r with %r at line %d", word.text, replacement, word.line_no + 1)
            # inserted text is not re-checked
            self.pos = word.start + len(replacement)
            self._resume()
        else:
            self._print("Unknown command")

    # ------------- helpers -------------

    def _replacement(self, rest: str) -> Optional[str]:
        """Text after the command (one separating blank dropped), else the next input line."""
        if rest[:1] == " ":
            rest = rest[1:]
        if rest:
            return rest
        try:
            return self._read(CFG.REPLACEMENT_PROMPT)
        except EOFError:
            self._print()
            return None

    def _show_context(self, word: Word) -> None:
        i = word.line_no
        line = self.lines.get(i)
        self._print()
        if i > 0:
            self._print(self.lines.get(i - 1))
        self._print(line[:word.start] + self.highlighter.misspelled(word.text) + line[word.end:])
        if i + 1 < len(self.lines):
            self._print(self.lines.get(i + 1))

    def _resume(self) -> None:
        self.word = None
        self.state = SessionState.SCANNING

    def _abort(self) -> None:
        print("Discarding changes", file=self._err or sys.stderr)
        log.info("Session aborted at line %d", self.line_no + 1)
        self.state = SessionState.ABORTED

    def _print(self, text: str = "") -> None:
        print(text, file=self._out or sys.stdout)
