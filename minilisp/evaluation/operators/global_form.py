from minilisp import EvaluatorFn, LispValue
from minilisp.errors import MiniLispTypeError
from minilisp.evaluation.operators.arity import check_arity
from minilisp.types.environment import Environment
from minilisp.types.expression import Compound, Expression, SymbolRef
from minilisp.types.nil import Nil
from minilisp.types.value import kind_of


def global_op(args: tuple[Expression, ...], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    (global name value)
    `name` is taken literally and never evaluated; the binding is created or overwritten.
    """
    check_arity("global", args, 2, 2)
    name, val_expr = args
    if not isinstance(name, SymbolRef):
        actual = "expression" if isinstance(name, Compound) else kind_of(name.value)
        raise MiniLispTypeError("global", 1, "symbol", actual)
    env.define(name.name, evaluate_fn(val_expr, env))
    return Nil
