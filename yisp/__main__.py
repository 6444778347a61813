from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from yisp.interpreter import Interpreter
from yisp.repl import repl, run_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yisp", description="Yisp, a minimal Lisp.")
    parser.add_argument("file", nargs="?", type=Path,
                        help="evaluate the single expression in FILE instead of starting a REPL")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="raise on unknown builtins and bad call heads instead of returning error symbols")
    parser.add_argument("-v", "--verbose", action="store_true", help="log each evaluation")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    interp = Interpreter(prelude='auto', strict=args.strict)
    if args.file is not None:
        source = args.file.read_text(encoding='utf-8')
        return 0 if run_file(interp, source) else 1

    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
