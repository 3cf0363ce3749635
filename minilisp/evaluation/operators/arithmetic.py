"""Integer arithmetic operators: + * - / %.

All operands must be Integers. Results are checked against the 32-bit range,
and division truncates toward zero (the remainder takes the dividend's sign).
"""

from __future__ import annotations

from minilisp import EvaluatorFn, LispValue
from minilisp.errors import MiniLispArithmeticError
from minilisp.evaluation.operators.arity import check_arity
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression
from minilisp.types.value import checked_integer, expect_integer


def _integer_args(
    name: str, args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn
) -> list[int]:
    return [
        expect_integer(evaluate_fn(arg, env), name, i)
        for i, arg in enumerate(args, start=1)
    ]


def _fold(name: str, args, env, evaluate_fn, start: int, combine) -> int:
    check_arity(name, args, 1)
    result = start
    for i, arg in enumerate(args, start=1):
        value = expect_integer(evaluate_fn(arg, env), name, i)
        result = checked_integer(combine(result, value), name)
    return result


def add_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return _fold("+", args, env, evaluate_fn, 0, lambda a, b: a + b)


def mul_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    return _fold("*", args, env, evaluate_fn, 1, lambda a, b: a * b)


def sub_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    check_arity("-", args, 2, 2)
    left, right = _integer_args("-", args, env, evaluate_fn)
    return checked_integer(left - right, "-")


def truncated_divmod(left: int, right: int, name: str) -> tuple[int, int]:
    """Quotient rounded toward zero, and the matching remainder."""
    if right == 0:
        raise MiniLispArithmeticError(f"{name}: division by zero")
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return quotient, left - right * quotient


def div_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    check_arity("/", args, 2, 2)
    left, right = _integer_args("/", args, env, evaluate_fn)
    quotient, _ = truncated_divmod(left, right, "/")
    return checked_integer(quotient, "/")


def mod_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    check_arity("%", args, 2, 2)
    left, right = _integer_args("%", args, env, evaluate_fn)
    _, remainder = truncated_divmod(left, right, "%")
    return remainder
