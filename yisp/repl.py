from __future__ import annotations

import logging
import sys
from typing import TextIO

from yisp.errors import YispError
from yisp.interpreter import Interpreter

logger = logging.getLogger(__name__)

BANNER = "Enter S-expression (or type 'exit' to quit):"
PROMPT = "> "
FAREWELL = "Thanks for using Yisp."
EXIT_COMMAND = "exit"


def format_error(ex: YispError) -> str:
    return f"Error ({ex.kind}): {ex}"


def repl(interp: Interpreter, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Read one expression per line until `exit` or end of input.

    An error is reported and the session continues with the next line.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stdout.write(BANNER + "\n")
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.rstrip("\n")
        if line == EXIT_COMMAND:
            break
        try:
            stdout.write(interp.eval_line(line) + "\n")
        except YispError as ex:
            logger.debug("line failed: %r", line, exc_info=True)
            stdout.write(format_error(ex) + "\n")
    stdout.write(FAREWELL + "\n")


def run_file(interp: Interpreter, source: str, stdout: TextIO | None = None) -> bool:
    """Evaluate the single expression in `source` and print it once.

    Returns False when evaluation failed.
    """
    stdout = stdout or sys.stdout
    try:
        stdout.write(interp.run_source(source) + "\n")
    except YispError as ex:
        stdout.write(format_error(ex) + "\n")
        return False
    return True
