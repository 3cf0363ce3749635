from minilisp import EvaluatorFn, LispValue
from minilisp.evaluation.operators.arity import check_arity
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression
from minilisp.types.nil import Nil
from minilisp.types.value import render


def print_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(print x): write the rendering of x and a newline to stdout; returns nil."""
    check_arity("print", args, 1, 1)
    print(render(evaluate_fn(args[0], env)))
    return Nil
