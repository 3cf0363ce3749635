from minilisp import EvaluatorFn, LispValue
from minilisp.types.environment import Environment
from minilisp.types.expression import Expression
from minilisp.types.nil import Nil


def block_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    result: LispValue = Nil
    for e in args:
        result = evaluate_fn(e, env)
    return result
