from __future__ import annotations

from minilisp import EvaluatorFn, LispValue
from minilisp.evaluation.operators.arity import check_arity
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression
from minilisp.types.value import expect_integer, values_equal


def eq_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(= a b): structural equality over any two values. Always returns a Bool."""
    check_arity("=", args, 2, 2)
    left = evaluate_fn(args[0], env)
    right = evaluate_fn(args[1], env)
    return values_equal(left, right)


def _compare(name: str, args, env, evaluate_fn) -> tuple[int, int]:
    check_arity(name, args, 2, 2)
    left = expect_integer(evaluate_fn(args[0], env), name, 1)
    right = expect_integer(evaluate_fn(args[1], env), name, 2)
    return left, right


def lt_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    left, right = _compare("<", args, env, evaluate_fn)
    return left < right


def gt_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    left, right = _compare(">", args, env, evaluate_fn)
    return left > right
