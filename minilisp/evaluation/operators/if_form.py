from minilisp import EvaluatorFn, LispValue
from minilisp.evaluation.operators.arity import check_arity
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression
from minilisp.types.nil import Nil
from minilisp.types.value import expect_bool


def if_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    check_arity("if", args, 2, 3)

    # The condition must be a Bool; there is no truthiness
    if expect_bool(evaluate_fn(args[0], env), "if", 1):
        return evaluate_fn(args[1], env)
    elif len(args) > 2:
        return evaluate_fn(args[2], env)
    else:
        return Nil
