from __future__ import annotations

from typing import Optional, Sequence

from minilisp.errors import MiniLispArityError


def check_arity(
    operator: str, args: Sequence, minimum: int, maximum: Optional[int] = None
) -> None:
    """Raise MiniLispArityError unless minimum <= len(args) <= maximum (None = unbounded)."""
    n = len(args)
    if n < minimum or (maximum is not None and n > maximum):
        if maximum is None:
            expected = f"at least {minimum}"
        elif minimum == maximum:
            expected = f"exactly {minimum}"
        else:
            expected = f"{minimum} to {maximum}"
        raise MiniLispArityError(operator, expected, n)
