"""
Calc Parser - precedence climbing over a two-token window

The parser holds the current token and one token of lookahead. A statement
is an assignment when the lookahead is '='; anything else is parsed as a
bare expression. Expressions use precedence climbing:

    LOWEST       statement level
    ADD_SUB      + -
    MUL_DIV_MOD  * / %
    PREFIX       unary + -

Operands on the right of an infix operator are parsed at that operator's
own precedence, which makes equal-precedence operators bind to the left.
The whole line must form one statement; leftover tokens are an error.
"""

from typing import Union
import logging

from .tokenizer import CalcTokenizer, Token, TokenType
from .ast_nodes import (
    ASTNode, Literal, Identifier, Negative, Binary, BinaryOperator,
    Statement, ExpressionStatement, Assignment, show_statement,
)
from .errors import (
    ParseError,
    E_UNEXPECTED_TOKEN, E_MISSING_RPAREN, E_INVALID_OPERATOR,
    E_INVALID_ASSIGN_TARGET, E_TRAILING_INPUT,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Precedence Table
# ============================================================================

LOWEST = 0
ADD_SUB = 1
MUL_DIV_MOD = 2
PREFIX = 3

PRECEDENCES = {
    '+': ADD_SUB,
    '-': ADD_SUB,
    '*': MUL_DIV_MOD,
    '/': MUL_DIV_MOD,
    '%': MUL_DIV_MOD,
}

INFIX_OPERATORS = {
    '+': BinaryOperator.ADD,
    '-': BinaryOperator.SUB,
    '*': BinaryOperator.MUL,
    '/': BinaryOperator.DIV,
    '%': BinaryOperator.MOD,
}


def precedence(token: Token) -> int:
    """Infix binding strength of a token; LOWEST for non-operators"""
    if token.type != TokenType.OPERATOR:
        return LOWEST
    return PRECEDENCES.get(token.value, LOWEST)


def describe(token: Token) -> str:
    if token.type == TokenType.EOF:
        return "end of input"
    if token.type == TokenType.ASSIGN:
        return "'='"
    return f"'{token.value}'"


# ============================================================================
# Parser
# ============================================================================

class CalcParser:
    """Parse one line of calculator source into a Statement"""

    def __init__(self, source: Union[str, CalcTokenizer], strict: bool = False):
        if isinstance(source, CalcTokenizer):
            self.tokenizer = source
        else:
            self.tokenizer = CalcTokenizer(source, strict=strict)
        self.cur = self.tokenizer.next_token()
        self.next = self.tokenizer.next_token()

    def parse_statement(self) -> Statement:
        """Parse the entire line as a single statement"""
        if self.next.type == TokenType.ASSIGN:
            if self.cur.type != TokenType.IDENTIFIER:
                raise ParseError(
                    E_INVALID_ASSIGN_TARGET,
                    f"Cannot assign to {describe(self.cur)} at position {self.cur.pos}",
                )
            name = self.cur.value
            self._read_token()
            self._read_token()
            stmt = Assignment(name=name, value=self.parse_expression(LOWEST))
        else:
            stmt = ExpressionStatement(expr=self.parse_expression(LOWEST))

        if not self.next.is_eof():
            raise ParseError(
                E_TRAILING_INPUT,
                f"Unexpected {describe(self.next)} at position {self.next.pos}",
            )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Parsed statement: %s", show_statement(stmt))
        return stmt

    def parse_expression(self, prec: int) -> ASTNode:
        """Parse an expression whose operators bind tighter than prec"""
        left = self._parse_prefix()

        while not self.next.is_eof() and prec < precedence(self.next):
            self._read_token()
            left = self._parse_infix(left)

        return left

    def _parse_prefix(self) -> ASTNode:
        token = self.cur
        if token.type == TokenType.INTEGER:
            return Literal(value=token.value)
        if token.type == TokenType.IDENTIFIER:
            return Identifier(name=token.value)
        if token.is_operator('+') or token.is_operator('-'):
            return self._parse_signed()
        if token.is_operator('('):
            return self._parse_grouped()
        raise ParseError(
            E_UNEXPECTED_TOKEN,
            f"Unexpected {describe(token)} at position {token.pos}",
        )

    def _parse_signed(self) -> ASTNode:
        """Parse unary + or -; unary + is the identity"""
        op = self.cur.value
        self._read_token()
        operand = self.parse_expression(PREFIX)
        if op == '-':
            return Negative(child=operand)
        return operand

    def _parse_grouped(self) -> ASTNode:
        open_pos = self.cur.pos
        self._read_token()
        expr = self.parse_expression(LOWEST)
        if not self.next.is_operator(')'):
            raise ParseError(
                E_MISSING_RPAREN,
                f"Expected ')' to close '(' at position {open_pos}, found {describe(self.next)}",
            )
        self._read_token()
        return expr

    def _parse_infix(self, left: ASTNode) -> ASTNode:
        token = self.cur
        op = INFIX_OPERATORS.get(token.value) if token.type == TokenType.OPERATOR else None
        if op is None:
            raise ParseError(
                E_INVALID_OPERATOR,
                f"Unknown infix operator {describe(token)} at position {token.pos}",
            )
        prec = precedence(token)
        self._read_token()
        right = self.parse_expression(prec)
        return Binary(op=op, left=left, right=right)

    def _read_token(self):
        """Shift the lookahead into the current slot"""
        self.cur = self.next
        self.next = self.tokenizer.next_token()


def parse_line(source: str, strict: bool = False) -> Statement:
    """Parse one line into a Statement (convenience function)"""
    return CalcParser(source, strict=strict).parse_statement()


__all__ = [
    'CalcParser', 'parse_line', 'precedence',
    'LOWEST', 'ADD_SUB', 'MUL_DIV_MOD', 'PREFIX',
]
