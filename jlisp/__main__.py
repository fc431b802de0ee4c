"""Command line driver: `python -m jlisp [FILE ...]`."""

from __future__ import annotations

import logging
import sys

from jlisp import __version__
from jlisp.config import get_log_level
from jlisp.interpreter import Interpreter
from jlisp.types.errors import JlispSyntaxError
from jlisp.types.value import LispError, to_string

PROMPT = ">> "


def repl(interp: Interpreter) -> None:
    print(f"Jlisp Version {__version__}")
    print("Press Ctrl+c to Exit")
    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return
        try:
            print(to_string(interp.eval(line)))
        except JlispSyntaxError as exc:
            print(exc)
        except RecursionError:
            print("Error: maximum recursion depth exceeded")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=get_log_level())

    interp = Interpreter()
    if not args:
        repl(interp)
        return 0

    for path in args:
        result = interp.load(path)
        if isinstance(result, LispError):
            print(to_string(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
