"""
Calc Evaluator - tree-walking evaluation against a variable context

The evaluator owns the variable context (name -> int). It lives as long as
the evaluator and is only reachable through the accessor methods below.
Reading an unset variable raises UndefinedVariableError; nothing is ever
inserted on read.

Division truncates toward zero and the remainder takes the sign of the
dividend, so that a == (a / b) * b + a % b for every b != 0.
"""

from types import MappingProxyType
from typing import Dict, Mapping
import logging

from .ast_nodes import (
    ASTNode, Literal, Identifier, Negative, Binary, BinaryOperator,
    Statement, ExpressionStatement, Assignment,
)
from .errors import (
    EvalError, UndefinedVariableError, DivisionByZeroError, ModuloByZeroError,
    E_UNKNOWN_NODE,
)

logger = logging.getLogger(__name__)


def trunc_div(left: int, right: int) -> int:
    """Integer division rounding toward zero"""
    if right == 0:
        raise DivisionByZeroError()
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def trunc_mod(left: int, right: int) -> int:
    """Remainder with the sign of the dividend"""
    if right == 0:
        raise ModuloByZeroError()
    return left - right * trunc_div(left, right)


class CalcEvaluator:
    """Evaluate calculator statements"""

    def __init__(self):
        self._ctx: Dict[str, int] = {}

    # ------------------------------------------------------------------
    # Variable context
    # ------------------------------------------------------------------

    def vars(self) -> Mapping[str, int]:
        """Read-only live view of all variables"""
        return MappingProxyType(self._ctx)

    def get_var(self, name: str) -> int:
        if name not in self._ctx:
            raise UndefinedVariableError(name)
        return self._ctx[name]

    def set_var(self, name: str, value: int):
        self._ctx[name] = value

    def clear_var(self, name: str):
        """Remove one variable; unknown names are ignored"""
        self._ctx.pop(name, None)

    def clear_vars(self):
        self._ctx.clear()

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def eval_statement(self, stmt: Statement) -> int:
        """Evaluate a statement, applying any assignment before returning"""
        if isinstance(stmt, Assignment):
            value = self.evaluate(stmt.value)
            self.set_var(stmt.name, value)
            logger.debug("Assigned %s = %d", stmt.name, value)
            return value
        elif isinstance(stmt, ExpressionStatement):
            return self.evaluate(stmt.expr)
        else:
            raise EvalError(E_UNKNOWN_NODE, f"Unknown statement type: {type(stmt).__name__}")

    def evaluate(self, node: ASTNode) -> int:
        """Evaluate an expression node"""
        if isinstance(node, Literal):
            return node.value

        elif isinstance(node, Identifier):
            return self.get_var(node.name)

        elif isinstance(node, Negative):
            negate = False
            while isinstance(node, Negative):
                negate = not negate
                node = node.child
            value = self.evaluate(node)
            return -value if negate else value

        elif isinstance(node, Binary):
            # Left-associative chains grow down the left spine; walk it
            # iteratively so a long flat line does not recurse per operator
            spine = []
            while isinstance(node, Binary):
                spine.append(node)
                node = node.left
            value = self.evaluate(node)
            for binary in reversed(spine):
                right = self.evaluate(binary.right)
                value = self._eval_binary_op(binary.op, value, right)
            return value

        else:
            raise EvalError(E_UNKNOWN_NODE, f"Unknown AST node type: {type(node).__name__}")

    def _eval_binary_op(self, op: BinaryOperator, left: int, right: int) -> int:
        if op is BinaryOperator.ADD:
            return left + right
        elif op is BinaryOperator.SUB:
            return left - right
        elif op is BinaryOperator.MUL:
            return left * right
        elif op is BinaryOperator.DIV:
            return trunc_div(left, right)
        elif op is BinaryOperator.MOD:
            return trunc_mod(left, right)
        else:
            raise EvalError(E_UNKNOWN_NODE, f"Unknown binary operator: {op}")


__all__ = ['CalcEvaluator', 'trunc_div', 'trunc_mod']
