from __future__ import annotations
import logging
from typing import List

from .config import ENCODING
from .errors import FileOpenError

log = logging.getLogger(__name__)


def read_lines(path: str) -> List[str]:
    """
    Read a whole file as a list of lines without their terminators.

    A line ends at a line terminator or at end-of-file; a final terminator
    does not produce an extra empty line. Raises FileOpenError when the file
    cannot be opened, read or decoded.
    """
    try:
        with open(path, "r", encoding=ENCODING) as f:
            lines = [ln.rstrip("\r\n") for ln in f]
    except (OSError, UnicodeDecodeError) as exc:
        raise FileOpenError(path) from exc
    log.info("Read %d lines from %s", len(lines), path)
    return lines
