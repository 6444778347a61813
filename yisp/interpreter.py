from __future__ import annotations

import logging
from typing import Iterator, Literal

from yisp import SExpression, Value
from yisp.config import get_prelude_path
from yisp.evaluation.evaluator import evaluate
from yisp.printer import to_str
from yisp.reader.parser import read, read_all
from yisp.runtime_context import strict_mode
from yisp.types.environment import Environment
from yisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Owns the global environment and feeds text through read, evaluate and
    print. Definitions persist across calls.

    `strict` applies to this interpreter's evaluations only; None follows
    the ambient mode (`YISP_STRICT`, or `set_strict`).
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = None,
        *,
        strict: bool | None = None,
    ):
        self.strict = strict
        self.env: Environment = Environment()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path is not None:
                logger.debug("loading prelude from %s", path)
                self.eval_prelude(path.read_text(encoding='utf-8'))
        elif prelude:
            self.eval_prelude(prelude)

    def eval_expr(self, expr: SExpression) -> Value:
        logger.debug("evaluating %s", to_str(expr))
        with strict_mode(self.strict):
            return evaluate(expr, self.env)

    def eval_prelude(self, code: str) -> None:
        """Evaluate every expression in `code` for its side effects."""
        for expr in read_all(code):
            self.eval_expr(expr)

    def eval_all(self, code: str) -> Iterator[Value]:
        for expr in read_all(code):
            yield self.eval_expr(expr)

    def eval(self, code: str) -> Value:
        """Evaluate every top-level expression; return the last value."""
        result: Value = Nil
        for result in self.eval_all(code):
            pass
        return result

    def eval_line(self, line: str) -> str:
        """REPL step: one expression from `line`, evaluated and printed."""
        return to_str(self.eval_expr(read(line)))

    def run_source(self, source: str) -> str:
        """Batch step: exactly one expression from a whole buffer."""
        return to_str(self.eval_expr(read(source)))
