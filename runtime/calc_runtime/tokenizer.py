"""
Calc Tokenizer - Lazy Line Tokenizer

Turns one line of calculator source into tokens, one token per call.
The sequence always ends with a single EOF token; asking for more after
that keeps returning EOF.

Token kinds:
    OPERATOR    + - * / % ( )
    INTEGER     run of ASCII digits, base 10
    IDENTIFIER  run of ASCII letters and underscores
    ASSIGN      =
    EOF         end of line

Unrecognized characters end the line (lenient mode). With strict=True they
raise LexError instead.
"""

from typing import Any, Iterator, List
from dataclasses import dataclass
import logging

from .errors import LexError, E_INVALID_CHARACTER

logger = logging.getLogger(__name__)


# ============================================================================
# Token Types
# ============================================================================

class TokenType:
    """Token type constants"""
    OPERATOR = "OPERATOR"
    INTEGER = "INTEGER"
    IDENTIFIER = "IDENTIFIER"
    ASSIGN = "ASSIGN"
    EOF = "EOF"


OPERATOR_CHARS = frozenset('+-*/%()')
DIGITS = frozenset('0123456789')
LETTERS = frozenset('abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_')


@dataclass(frozen=True)
class Token:
    """Token from calculator source"""
    type: str
    value: Any
    pos: int

    def is_eof(self) -> bool:
        return self.type == TokenType.EOF

    def is_operator(self, op: str) -> bool:
        return self.type == TokenType.OPERATOR and self.value == op


# ============================================================================
# Tokenizer
# ============================================================================

class CalcTokenizer:
    """Tokenize a single line of calculator source"""

    def __init__(self, source: str, strict: bool = False):
        self.source = source
        self.strict = strict
        self.pos = 0
        self._done = False

    def next_token(self) -> Token:
        """Produce the next token; EOF forever once the line is exhausted"""
        if self._done:
            return Token(TokenType.EOF, None, len(self.source))

        self._skip_spaces()
        if self.pos >= len(self.source):
            return self._eof()

        ch = self.source[self.pos]
        start = self.pos

        if ch in OPERATOR_CHARS:
            self.pos += 1
            return Token(TokenType.OPERATOR, ch, start)
        elif ch == '=':
            self.pos += 1
            return Token(TokenType.ASSIGN, None, start)
        elif ch in DIGITS:
            return Token(TokenType.INTEGER, self._read_number(), start)
        elif ch in LETTERS:
            return Token(TokenType.IDENTIFIER, self._read_identifier(), start)

        if self.strict:
            raise LexError(E_INVALID_CHARACTER, f"Unexpected character '{ch}' at position {start}")
        logger.debug("Treating %r at position %d as end of input", ch, start)
        return self._eof()

    def tokenize(self) -> List[Token]:
        """Drain the remaining tokens, EOF included"""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.is_eof():
                return

    def _eof(self) -> Token:
        self._done = True
        return Token(TokenType.EOF, None, self.pos)

    def _skip_spaces(self):
        # Only ASCII space; tabs and newlines are not part of the grammar
        while self.pos < len(self.source) and self.source[self.pos] == ' ':
            self.pos += 1

    def _read_number(self) -> int:
        """Read integer literal"""
        num = 0
        while self.pos < len(self.source) and self.source[self.pos] in DIGITS:
            num = num * 10 + (ord(self.source[self.pos]) - ord('0'))
            self.pos += 1
        return num

    def _read_identifier(self) -> str:
        """Read identifier"""
        start = self.pos
        while self.pos < len(self.source) and self.source[self.pos] in LETTERS:
            self.pos += 1
        return self.source[start:self.pos]


__all__ = ['TokenType', 'Token', 'CalcTokenizer']
