from __future__ import annotations

import logging

from minilisp import LispValue
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import parse_all
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.types.value import render

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One evaluation session: owns an Environment and keeps it across calls,
    so globals defined by one call are visible to the next.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else Environment()

    def eval(self, code: str) -> LispValue:
        """Evaluate a single expression."""
        return evaluate(code, self.env)

    def eval_all(self, code: str) -> LispValue:
        """Evaluate every top-level expression in `code`; return the last value or nil."""
        result: LispValue = Nil
        exprs = parse_all(code)
        logger.debug("evaluating %d top-level expression(s)", len(exprs))
        for expr in exprs:
            result = evaluate(expr, self.env)
        return result

    @staticmethod
    def render(value: LispValue) -> str:
        return render(value)
