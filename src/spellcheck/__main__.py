from __future__ import annotations
import argparse, logging, sys

from . import __version__
from . import config as CFG
from .engine import SpellChecker
from .errors import SpellcheckError, UserQuit
from .highlight import make_highlighter


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="spellcheck",
        usage="%(prog)s <textfile.txt> [words.txt]",
        description="Interactive spell checker: replace, add or skip every word missing from a word list.",
    )
    p.add_argument("textfile", help="Text file to check; rewritten in place, original kept as <textfile>.bak")
    p.add_argument("dictionary", nargs="?", default=None,
                   help=f"Word list, one lowercase word per line (default: {CFG.DEFAULT_DICTIONARY})")
    p.add_argument("--no-color", action="store_true", help="Do not highlight misspelled words")
    p.add_argument("--overwrite-backup", action="store_true",
                   help="Replace an existing <textfile>.bak instead of failing")
    p.add_argument("--verbose", action="store_true")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)

    highlighter = make_highlighter(False if args.no_color else None)
    checker = SpellChecker()
    try:
        checker.load(args.textfile, args.dictionary)
        checker.check(highlighter=highlighter)
        checker.save(overwrite_backup=args.overwrite_backup)
    except UserQuit as exc:
        # "Discarding changes" already reported by the session
        return exc.exit_code
    except SpellcheckError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_code
    return CFG.EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
