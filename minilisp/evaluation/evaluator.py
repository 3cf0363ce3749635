"""Tree-walking evaluator for minilisp.

Literals evaluate to themselves, symbols are looked up in the Environment,
and compound expressions are dispatched by operator name through the
operator registry. Argument evaluation is left entirely to the operator.
"""

from __future__ import annotations

import logging

from minilisp import LispValue
from minilisp.errors import MiniLispSyntaxError
from minilisp.evaluation.operators import get_operator
from minilisp.reader.parser import parse
from minilisp.types.environment import Environment
from minilisp.types.expression import Compound, Expression, Literal, SymbolRef

logger = logging.getLogger(__name__)


def evaluate(source: str | Expression, env: Environment) -> LispValue:
    """
    Parse (when given text) and evaluate one program fragment against `env`.

    Raises a MiniLispError subclass on malformed syntax, unknown operators,
    unbound symbols, arity or kind mismatches and arithmetic errors.
    """
    expr = parse(source) if isinstance(source, str) else source
    try:
        return evaluate_expr(expr, env)
    except RecursionError:
        # Only reachable when the configured depth exceeds the interpreter stack
        raise MiniLispSyntaxError("Expression nested too deeply") from None


def evaluate_expr(expr: Expression, env: Environment) -> LispValue:
    match expr:
        case Literal(value=value):
            return value
        case SymbolRef(name=name):
            return env.lookup(name)
        case Compound(operator=operator, args=args):
            op = get_operator(operator)
            logger.debug("apply %s to %d arg(s)", operator, len(args))
            return op(args, env, evaluate_expr)
    raise TypeError(f"Not an expression: {expr!r}")
