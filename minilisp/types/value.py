"""Runtime value model.

Values are plain Python objects tagged by their exact type:

    Integer -> int (32-bit signed range)
    Bool    -> bool
    String  -> str
    Nil     -> the Nil singleton

`bool` is a subclass of `int` in Python, so every kind test here uses the
exact type rather than isinstance.
"""

from __future__ import annotations

from minilisp import LispValue
from minilisp.errors import MiniLispArithmeticError, MiniLispTypeError
from minilisp.types.nil import Nil, NilType

INT_BITS = 32
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1

INTEGER = "integer"
BOOL = "bool"
STRING = "string"
NIL = "nil"

_KINDS: dict[type, str] = {
    int: INTEGER,
    bool: BOOL,
    str: STRING,
    NilType: NIL,
}

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
}


def kind_of(value: LispValue) -> str:
    """Return the kind name of a runtime value; raise TypeError for foreign objects."""
    try:
        return _KINDS[type(value)]
    except KeyError:
        raise TypeError(f"Not a minilisp value: {value!r}") from None


def is_integer(value: LispValue) -> bool:
    return type(value) is int


def is_bool(value: LispValue) -> bool:
    return type(value) is bool


def is_string(value: LispValue) -> bool:
    return type(value) is str


def is_nil(value: LispValue) -> bool:
    return value is Nil


def fits_integer(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


def checked_integer(n: int, operator: str) -> int:
    """Return n unchanged, or raise if it does not fit the integer width."""
    if not fits_integer(n):
        raise MiniLispArithmeticError(f"{operator}: integer overflow ({n})")
    return n


def expect_integer(value: LispValue, operator: str, position: int) -> int:
    if not is_integer(value):
        raise MiniLispTypeError(operator, position, INTEGER, kind_of(value))
    return value


def expect_bool(value: LispValue, operator: str, position: int) -> bool:
    if not is_bool(value):
        raise MiniLispTypeError(operator, position, BOOL, kind_of(value))
    return value


def values_equal(a: LispValue, b: LispValue) -> bool:
    # Same kind and same payload; never raises across kinds
    if type(a) is not type(b):
        return False
    return a == b


def render(value: LispValue) -> str:
    """Textual rendering used by print and the read loop."""
    if is_bool(value):
        return "true" if value else "false"
    if is_integer(value):
        return str(value)
    if is_string(value):
        return '"' + "".join(_STRING_ESCAPES.get(c, c) for c in value) + '"'
    if is_nil(value):
        return "nil"
    raise TypeError(f"Not a minilisp value: {value!r}")
