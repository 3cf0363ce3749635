class MiniLispError(Exception):
    """ Base class for all minilisp errors"""
    pass

class MiniLispSyntaxError(MiniLispError):
    """ Raised when source text cannot be tokenized or parsed"""
    pass

class MiniLispUnknownOperator(MiniLispError):
    """ Raised when a compound expression names an operator that does not exist"""

    def __init__(self, name: str):
        super().__init__(f"Unknown operator '{name}'")
        self.name = name

class MiniLispUnboundSymbol(MiniLispError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Cannot lookup unbound symbol {name}")
        self.name = name

class MiniLispArityError(MiniLispError):
    """ Raised when the number of arguments passed to an operator is incorrect"""

    def __init__(self, operator: str, expected: str, got: int):
        super().__init__(f"{operator} expects {expected} argument(s), got {got}")
        self.operator = operator
        self.expected = expected
        self.got = got

class MiniLispTypeError(MiniLispError):
    """ Raised when an operator receives a value of the wrong kind"""

    def __init__(self, operator: str, position: int, expected: str, actual: str):
        super().__init__(
            f"{operator} argument {position} must be {expected}, got {actual}"
        )
        self.operator = operator
        self.position = position
        self.expected = expected
        self.actual = actual

class MiniLispArithmeticError(MiniLispError):
    """ Raised on division or modulo by zero, and on integer overflow"""
