from __future__ import annotations

import argparse
import sys

from conslisp.config import get_log_level
from conslisp.interpreter import Interpreter
from conslisp.logging_config import setup_logging
from conslisp.printer import to_string
from conslisp.repl import repl
from conslisp.types.errors import ConsLispError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="conslisp", description="A small Lisp interpreter")
    parser.add_argument("file", nargs="?", help="source file to run; starts a REPL when omitted")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--log-file", default=None, help="write logs to this file instead of stderr")
    parser.add_argument("--no-prelude", action="store_true", help="start with primitives only")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or get_log_level(), args.log_file)

    interp = Interpreter(prelude=None if args.no_prelude else 'auto')
    if args.file is None:
        repl(interp)
        return 0

    try:
        result = interp.load_file(args.file)
    except (ConsLispError, RecursionError, OSError) as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1
    print(to_string(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
