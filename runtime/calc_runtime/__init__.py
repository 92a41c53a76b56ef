"""
Calc Runtime - Integer Calculator Language

Line-oriented arithmetic language with integer literals, identifiers,
assignment, + - * / %, unary + and -, and parentheses.

**Pipeline:**
- Tokenizer: lazy tokens for one line
- Parser: precedence climbing into an AST
- Evaluator: tree walk against a persistent variable context

**Collaborators:**
- CalcRuntime: one-line facade over the pipeline
- Repl: interactive read-loop (python -m calc_runtime)

Version: 1.0.0
"""

__version__ = '1.0.0'

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    CalcError, LexError, ParseError, EvalError,
    UndefinedVariableError, DivisionByZeroError, ModuloByZeroError,
    NestingTooDeepError,
    E_INVALID_CHARACTER,
    E_UNEXPECTED_TOKEN, E_MISSING_RPAREN, E_INVALID_OPERATOR,
    E_INVALID_ASSIGN_TARGET, E_TRAILING_INPUT,
    E_UNDEFINED_VARIABLE, E_DIVISION_BY_ZERO, E_MODULO_BY_ZERO,
    E_NESTING_TOO_DEEP,
)

# ============================================================================
# Pipeline
# ============================================================================

from .tokenizer import CalcTokenizer, Token, TokenType
from .ast_nodes import (
    BinaryOperator, ASTNode, Literal, Identifier, Negative, Binary,
    Statement, ExpressionStatement, Assignment, show_node, show_statement,
)
from .parser import CalcParser, parse_line
from .evaluator import CalcEvaluator

# ============================================================================
# Runtime Interface
# ============================================================================

from .runtime import CalcRuntime, execute_line
from .repl import Repl

__all__ = [
    '__version__',

    # Errors
    'CalcError', 'LexError', 'ParseError', 'EvalError',
    'UndefinedVariableError', 'DivisionByZeroError', 'ModuloByZeroError',
    'NestingTooDeepError',
    'E_INVALID_CHARACTER',
    'E_UNEXPECTED_TOKEN', 'E_MISSING_RPAREN', 'E_INVALID_OPERATOR',
    'E_INVALID_ASSIGN_TARGET', 'E_TRAILING_INPUT',
    'E_UNDEFINED_VARIABLE', 'E_DIVISION_BY_ZERO', 'E_MODULO_BY_ZERO',
    'E_NESTING_TOO_DEEP',

    # Pipeline
    'CalcTokenizer', 'Token', 'TokenType',
    'BinaryOperator', 'ASTNode', 'Literal', 'Identifier', 'Negative', 'Binary',
    'Statement', 'ExpressionStatement', 'Assignment', 'show_node', 'show_statement',
    'CalcParser', 'parse_line',
    'CalcEvaluator',

    # Runtime
    'CalcRuntime', 'execute_line', 'Repl',
]
