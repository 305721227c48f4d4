from __future__ import annotations
import os

# dictionary used when the command line names none
DEFAULT_DICTIONARY: str = os.environ.get("SPELLCHECK_DICTIONARY", "words.txt")

ENCODING: str = "utf-8"
# bytes the terminal could not decode (lone surrogates from input()) are written back as-is
WRITE_ERRORS: str = "surrogateescape"

# backup / temp file naming (appended to the text file path)
BACKUP_SUFFIX: str = ".bak"
TMP_SUFFIX: str = ".tmp"

# refuse to clobber an existing <path>.bak unless asked to
OVERWRITE_BACKUP: bool = False

# Progress logging (set SPELLCHECK_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("SPELLCHECK_VERBOSE") == "1"

# /* ~~~ exit codes ~~~ */
EXIT_OK: int = 0
EXIT_FAILURE: int = 1      # unreadable file, bad dictionary, failed rewrite
EXIT_USAGE: int = 2        # same value argparse uses for usage errors
EXIT_USER_QUIT: int = 3

# /* ~~~ interactive commands ~~~ */
CMD_REPLACE = "r"
CMD_ADD = "a"
CMD_NEXT = "n"
CMD_QUIT = "q"

PROMPT: str = "(r)eplace, (a)dd, (n)ext or (q)uit: "
REPLACEMENT_PROMPT: str = "Replacement: "

# ANSI SGR code for the misspelled word
HIGHLIGHT_CODE: str = "31"
