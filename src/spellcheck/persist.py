from __future__ import annotations
import logging
import os
import stat
import sys
import tempfile
from typing import Optional, TextIO

from . import config as CFG
from .errors import PersistenceError
from .line_store import LineStore

log = logging.getLogger(__name__)


def backup_path(path: str) -> str:
    return f"{path}{CFG.BACKUP_SUFFIX}"


class Persister:
    """
    Moves the original text file to <path>.bak, then writes the corrected lines
    to <path> through a fresh temp file in the same directory. Any failure
    raises PersistenceError.
    """
    def __init__(self, *, overwrite_backup: bool = CFG.OVERWRITE_BACKUP,
                 out: Optional[TextIO] = None) -> None:
        self.overwrite_backup = overwrite_backup
        self._out = out

    def save(self, lines: LineStore, path: str) -> str:
        """Back up `path` and rewrite it from `lines`; return the backup path."""
        self._print("Spellcheck complete.")
        bak = self.backup(path)
        self.write(lines, path, bak)
        return bak

    def backup(self, path: str) -> str:
        bak = backup_path(path)
        self._print(f"Backing up {path} to {bak}")
        if os.path.exists(bak) and not self.overwrite_backup:
            raise PersistenceError(bak, "backup file already exists")
        try:
            if self.overwrite_backup:
                os.replace(path, bak)
            else:
                os.rename(path, bak)
        except OSError as exc:
            raise PersistenceError(path, f"backup failed: {exc.strerror or exc}") from exc
        log.info("Backed up %s to %s", path, bak)
        return bak

    def write(self, lines: LineStore, path: str, bak: str = "") -> None:
        self._print(f"Writing updated {path}")
        tmp: Optional[str] = None
        try:
            # unique name: never reuses a file the user already has
            fd, tmp = tempfile.mkstemp(
                dir=os.path.dirname(os.path.abspath(path)),
                prefix=f".{os.path.basename(path)}.",
                suffix=CFG.TMP_SUFFIX,
            )
            with os.fdopen(fd, "w", encoding=CFG.ENCODING, errors=CFG.WRITE_ERRORS, newline="\n") as f:
                lines.dump(f)
            if bak:
                os.chmod(tmp, stat.S_IMODE(os.stat(bak).st_mode))
            os.replace(tmp, path)
        except (OSError, UnicodeError) as exc:
            if tmp is not None and os.path.isfile(tmp):
                os.remove(tmp)
            reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else exc
            kept = f"; original kept at {bak}" if bak else ""
            raise PersistenceError(path, f"write failed: {reason}{kept}") from exc
        log.info("Wrote %d lines to %s", len(lines), path)

    def _print(self, text: str) -> None:
        print(text, file=self._out or sys.stdout)
