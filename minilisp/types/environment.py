"""Runtime environment for minilisp.

A single flat mapping from variable names to values: the global state of one
evaluation session. There are no nested scopes. The Environment is owned by
whoever drives the session and is passed into every evaluation call.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator

from minilisp import LispValue
from minilisp.errors import MiniLispUnboundSymbol
from minilisp.types.value import render

logger = logging.getLogger(__name__)


class Environment:
    """Mapping from names to minilisp values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: dict[str, LispValue] | None = None):
        self.vars: dict[str, LispValue] = dict(bindings) if bindings else {}

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value`, overwriting any previous binding."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("global %s = %s", name, render(value))
        self.vars[name] = value

    def lookup(self, name: str) -> LispValue:
        """Return the value bound to `name`.

        Raises MiniLispUnboundSymbol if the name has no binding.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise MiniLispUnboundSymbol(name) from None

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {render(v)}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
