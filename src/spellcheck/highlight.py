from __future__ import annotations
import os
import sys
from typing import Protocol, TextIO

from .config import HIGHLIGHT_CODE

CSI = "\033["


class Highlighter(Protocol):
    def misspelled(self, text: str) -> str: ...


class PlainHighlighter:
    """No-op: for pipes, NO_COLOR and tests."""
    def misspelled(self, text: str) -> str:
        return text


class AnsiHighlighter:
    def __init__(self, code: str = HIGHLIGHT_CODE) -> None:
        self.code = code

    def misspelled(self, text: str) -> str:
        return f"{CSI}{self.code}m{text}{CSI}0m"


def supports_color(stream: TextIO) -> bool:
    return stream.isatty() and os.environ.get("NO_COLOR", "") == ""


def make_highlighter(color: bool | None = None, stream: TextIO | None = None) -> Highlighter:
    """Pick ANSI when `color` is true (or unset and `stream` is a color terminal)."""
    if color is None:
        color = supports_color(stream or sys.stdout)
    return AnsiHighlighter() if color else PlainHighlighter()
