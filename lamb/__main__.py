"""Command-line runner: python -m lamb [FILE]

Reads a program from FILE (or standard input), evaluates it with the console
built-ins installed and reports lamb errors on stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from lamb import config
from lamb.errors import LambError
from lamb.interpreter import Interpreter

logger = logging.getLogger("lamb")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lamb", description="Run a lamb program.")
    parser.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=None,
        help="program to run (default: standard input)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=config.get_log_level(), format="%(name)s: %(message)s")
    sys.setrecursionlimit(max(sys.getrecursionlimit(), config.get_recursion_limit()))

    if args.file is not None:
        with args.file:
            code = args.file.read()
    else:
        code = sys.stdin.read()

    interp = Interpreter(out=sys.stdout)
    try:
        interp.eval(code)
    except LambError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        logger.debug("recursion limit %d exceeded", sys.getrecursionlimit())
        print("error: maximum recursion depth exceeded", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
