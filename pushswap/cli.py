"""Command-line entry point: print the moves that sort the given integers."""

import sys

from .parsing import ParseError, parse_arguments, split_words
from .sorting import solve


def run(args, out):
    """Sort the integers in ``args`` and write the moves to ``out``.

    Returns the process exit status.
    """
    args = list(args)
    if not args:
        return 0
    if len(args) == 1:
        words = split_words(args[0], " ")
        if not words:
            return 0
        error_message = "Error\n"
    else:
        words = args
        error_message = "Error"
    try:
        values = parse_arguments(words)
    except ParseError:
        out.write(error_message)
        return 1
    for operation in solve(values):
        out.write(f"{operation}\n")
    return 0


def main(argv=None):
    """Run the sorter on ``argv`` (the process arguments by default)."""
    if argv is None:
        argv = sys.argv[1:]
    return run(argv, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())