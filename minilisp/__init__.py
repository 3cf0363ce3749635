# Core type aliases for minilisp's data model.
# Runtime values are plain Python objects: int (Integer), bool (Bool),
# str (String) and the Nil singleton. Parsed code is an Expression tree
# (see minilisp.types.expression), never a raw Python list.

from typing import Any, Callable

# Runtime value alias
LispValue = Any

# Evaluator function type: passed into operators so they can evaluate their arguments
EvaluatorFn = Callable[..., LispValue]


from minilisp.interpreter import Interpreter  # noqa: E402
from minilisp.evaluation.evaluator import evaluate  # noqa: E402
from minilisp.types.environment import Environment  # noqa: E402
from minilisp.types.nil import Nil  # noqa: E402

__all__ = ["LispValue", "EvaluatorFn", "Interpreter", "evaluate", "Environment", "Nil"]
