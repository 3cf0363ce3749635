from __future__ import annotations

from minilisp import EvaluatorFn, LispValue
from minilisp.evaluation.operators.arity import check_arity
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression
from minilisp.types.value import expect_bool


def _both(name: str, args, env, evaluate_fn) -> tuple[bool, bool]:
    # Both operands are always evaluated, left to right
    check_arity(name, args, 2, 2)
    left = expect_bool(evaluate_fn(args[0], env), name, 1)
    right = expect_bool(evaluate_fn(args[1], env), name, 2)
    return left, right


def and_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Logical AND of two Bools. Not short-circuiting."""
    left, right = _both("and", args, env, evaluate_fn)
    return left and right


def or_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Logical OR of two Bools. Not short-circuiting."""
    left, right = _both("or", args, env, evaluate_fn)
    return left or right


def not_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    check_arity("not", args, 1, 1)
    return not expect_bool(evaluate_fn(args[0], env), "not", 1)
