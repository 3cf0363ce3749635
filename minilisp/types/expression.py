"""Parsed, not-yet-evaluated syntax tree.

    Literal   - a constant Value leaf
    SymbolRef - an unresolved variable reference, looked up by name at eval time
    Compound  - an operator name applied to argument Expressions

Argument lists are tuples: fixed once parsed. Arity is an operator concern.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from minilisp import LispValue
from minilisp.types.value import render, values_equal


@dataclass(frozen=True, eq=False)
class Literal:
    value: LispValue

    def __eq__(self, other) -> bool:
        return isinstance(other, Literal) and values_equal(self.value, other.value)

    def __hash__(self) -> int:
        return hash((Literal, type(self.value), self.value))

    def __str__(self) -> str:
        return render(self.value)


@dataclass(frozen=True)
class SymbolRef:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Compound:
    operator: str
    args: tuple[Expression, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence but store it immutably
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    def __str__(self) -> str:
        return "(" + " ".join([self.operator, *(str(a) for a in self.args)]) + ")"


Expression = Union[Literal, SymbolRef, Compound]
