import argparse
import sys

from . import __version__
from .errors import MimeGuessError
from .guess import MimeGuess, from_ext, from_path
from .reverse import get_mime_extensions_str
from .validation import validate_table


def format_guess(label: str, guess: MimeGuess, show_all: bool) -> str:
    """
    Build the result line for one input.
    """
    if show_all:
        return f"{label}: {', '.join(guess)}"
    return f"{label}: {guess.first()}"


def guess_inputs(inputs, bare: bool, show_all: bool) -> int:
    """
    Print the guess for each input, warning on stderr for inputs with no match.
    Returns the number of inputs that had no match.
    """
    misses = 0
    for item in inputs:
        guess = from_ext(item) if bare else from_path(item)
        if guess:
            print(format_guess(item, guess, show_all))
        else:
            misses += 1
            print(f"⚠️ Unable to guess MIME type for: {item}", file=sys.stderr)
    return misses


def list_extensions(mime_types) -> int:
    """
    Print the extensions registered for each MIME type (wildcards allowed).
    Returns the number of MIME types with no registered extensions.
    """
    misses = 0
    for mime in mime_types:
        exts = get_mime_extensions_str(mime)
        if exts:
            print(f"{mime}: {' '.join(exts)}")
        else:
            misses += 1
            print(f"⚠️ No extensions registered for: {mime}", file=sys.stderr)
    return misses


def check_table() -> int:
    try:
        count = validate_table()
    except MimeGuessError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    print(f"✅ Extension table OK ({count} entries).")
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="mimeguess",
        description="Guess MIME types from file extensions.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        help="File names or paths to guess MIME types for.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-e",
        "--ext",
        action="store_true",
        help="Treat inputs as bare extensions (e.g. 'html') instead of paths.",
    )
    mode.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Treat inputs as MIME types (e.g. 'image/*') and list their extensions.",
    )
    mode.add_argument(
        "--check",
        action="store_true",
        help="Validate the built-in extension table and exit.",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Print every registered MIME type, not only the primary one.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.check:
        sys.exit(check_table())

    if not args.inputs:
        print("No inputs given.", file=sys.stderr)
        sys.exit(2)

    if args.reverse:
        misses = list_extensions(args.inputs)
    else:
        misses = guess_inputs(args.inputs, bare=args.ext, show_all=args.all)
    sys.exit(1 if misses else 0)
