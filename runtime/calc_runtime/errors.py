"""
Calc Runtime Errors

Every failure in the pipeline is a CalcError carrying a short code and a
human readable message. The three stages raise their own subclass so that
callers can tell a syntax problem from an arithmetic one:

- LexError: unrecognized character (strict tokenizer only)
- ParseError: the line is not a single valid statement
- EvalError: undefined variable, division or modulo by zero

NestingTooDeepError is raised by CalcRuntime when a line nests deeper than
the interpreter stack allows.
"""

# ============================================================================
# Error Codes
# ============================================================================

# Lexing
E_INVALID_CHARACTER = "E_INVALID_CHARACTER"

# Parsing
E_UNEXPECTED_TOKEN = "E_UNEXPECTED_TOKEN"
E_MISSING_RPAREN = "E_MISSING_RPAREN"
E_INVALID_OPERATOR = "E_INVALID_OPERATOR"
E_INVALID_ASSIGN_TARGET = "E_INVALID_ASSIGN_TARGET"
E_TRAILING_INPUT = "E_TRAILING_INPUT"

# Evaluation
E_UNDEFINED_VARIABLE = "E_UNDEFINED_VARIABLE"
E_DIVISION_BY_ZERO = "E_DIVISION_BY_ZERO"
E_MODULO_BY_ZERO = "E_MODULO_BY_ZERO"
E_UNKNOWN_NODE = "E_UNKNOWN_NODE"

# Either stage
E_NESTING_TOO_DEEP = "E_NESTING_TOO_DEEP"


# ============================================================================
# Exceptions
# ============================================================================

class CalcError(Exception):
    """Base exception for calc runtime errors"""
    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class LexError(CalcError):
    """Raised by the tokenizer in strict mode"""
    pass


class ParseError(CalcError):
    """Raised when a line is not a syntactically valid statement"""
    pass


class EvalError(CalcError):
    """Base class for failures while evaluating a statement"""
    pass


class UndefinedVariableError(EvalError):
    """Identifier read before any assignment"""
    def __init__(self, name: str):
        self.name = name
        super().__init__(E_UNDEFINED_VARIABLE, f"Undefined variable: {name}")


class DivisionByZeroError(EvalError):
    def __init__(self):
        super().__init__(E_DIVISION_BY_ZERO, "Division by zero")


class ModuloByZeroError(EvalError):
    def __init__(self):
        super().__init__(E_MODULO_BY_ZERO, "Modulo by zero")


class NestingTooDeepError(CalcError):
    """Line nests parentheses or unary operators past the interpreter stack"""
    def __init__(self):
        super().__init__(E_NESTING_TOO_DEEP, "Expression is nested too deeply")


__all__ = [
    'CalcError', 'LexError', 'ParseError', 'EvalError',
    'UndefinedVariableError', 'DivisionByZeroError', 'ModuloByZeroError',
    'NestingTooDeepError',
    'E_INVALID_CHARACTER',
    'E_UNEXPECTED_TOKEN', 'E_MISSING_RPAREN', 'E_INVALID_OPERATOR',
    'E_INVALID_ASSIGN_TARGET', 'E_TRAILING_INPUT',
    'E_UNDEFINED_VARIABLE', 'E_DIVISION_BY_ZERO', 'E_MODULO_BY_ZERO',
    'E_UNKNOWN_NODE', 'E_NESTING_TOO_DEEP',
]
