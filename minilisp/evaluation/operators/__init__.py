"""Registry of minilisp operators.

Maps operator names to handler functions. Every handler has the signature

    handler(args, env, evaluate_fn) -> value

and receives its arguments unevaluated, so control flow (if, while, block)
and binding (global) dispatch through the same table as arithmetic. The
table is closed: it is not extended at runtime.
"""

from types import MappingProxyType
from typing import Callable

from minilisp import EvaluatorFn, LispValue

from minilisp.errors import MiniLispUnknownOperator
from minilisp.evaluation.operators.arithmetic import add_op, mul_op, sub_op, div_op, mod_op
from minilisp.evaluation.operators.comparison_forms import eq_op, lt_op, gt_op
from minilisp.evaluation.operators.logic_forms import and_op, or_op, not_op
from minilisp.evaluation.operators.print_form import print_op
from minilisp.evaluation.operators.if_form import if_op
from minilisp.evaluation.operators.while_form import while_op
from minilisp.evaluation.operators.block_form import block_op
from minilisp.evaluation.operators.global_form import global_op
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression

Operator = Callable[[tuple[Expression, ...], Environment, EvaluatorFn], LispValue]

OPERATORS = MappingProxyType({
    "+": add_op,
    "*": mul_op,
    "-": sub_op,
    "/": div_op,
    "%": mod_op,
    "=": eq_op,
    "<": lt_op,
    ">": gt_op,
    "and": and_op,
    "or": or_op,
    "not": not_op,
    "print": print_op,
    "if": if_op,
    "while": while_op,
    "block": block_op,
    "global": global_op,
})


def get_operator(name: str) -> Operator:
    try:
        return OPERATORS[name]
    except KeyError:
        raise MiniLispUnknownOperator(name) from None
