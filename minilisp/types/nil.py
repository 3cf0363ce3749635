from __future__ import annotations


class NilType:
    """The single absent value. Equal only to itself and always falsy."""

    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    # Copies of Nil are Nil
    def __copy__(self): return self
    def __deepcopy__(self, memo): return self


Nil = NilType()
