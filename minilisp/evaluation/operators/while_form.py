from minilisp import EvaluatorFn, LispValue
from minilisp.evaluation.operators.arity import check_arity
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression
from minilisp.types.nil import Nil
from minilisp.types.value import expect_bool


def while_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(while cond body): re-evaluate cond before every pass; returns nil."""
    check_arity("while", args, 2, 2)
    cond, body = args
    while expect_bool(evaluate_fn(cond, env), "while", 1):
        evaluate_fn(body, env)
    return Nil
