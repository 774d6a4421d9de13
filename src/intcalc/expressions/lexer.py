"""Lexer/tokenizer for integer arithmetic expressions.

Converts an expression line into a list of tokens for the parser.

Token types:
- NUMBER: a run of decimal digits fitting a signed 64-bit integer
- OPERATOR: one of + - * / ^ (unary vs. binary is decided by the parser)
- Punctuation: LPAREN, RPAREN
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from intcalc.expressions.errors import ErrorKind, ExpressionError
from intcalc.expressions.operators import INT_MAX, OpKind


class TokenType(Enum):
    """Types of tokens in the expression language."""

    NUMBER = auto()
    OPERATOR = auto()
    LPAREN = auto()      # (
    RPAREN = auto()      # )


@dataclass(frozen=True)
class Token:
    """A single token from the lexer.

    Attributes:
        type: The token type
        value: The integer for NUMBER, the OpKind for OPERATOR, None otherwise
    """

    type: TokenType
    value: int | OpKind | None = None

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def display_name(self) -> str:
        """Name used by the ``tokens`` command, one per line."""
        if self.type == TokenType.NUMBER:
            return str(self.value)
        if self.type == TokenType.OPERATOR:
            return self.value.display_name
        if self.type == TokenType.LPAREN:
            return "OpenParen"
        return "CloseParen"


class LexerError(ExpressionError):
    """Error during lexical analysis."""


# Token patterns, tried in order
TOKEN_PATTERNS = [
    # Spaces and tabs (skip)
    (r"[ \t]+", None),

    (r"[0-9]+", TokenType.NUMBER),
    (r"[+\-*/^]", TokenType.OPERATOR),
    (r"\(", TokenType.LPAREN),
    (r"\)", TokenType.RPAREN),
]

_MAX_DIGITS = len(str(INT_MAX))

_COMPILED_PATTERNS = [
    (re.compile(pattern), token_type) for pattern, token_type in TOKEN_PATTERNS
]


class Lexer:
    """Tokenizer for arithmetic expressions.

    Usage:
        lexer = Lexer("3 - 4 * (5 + 1)")
        for token in lexer:
            print(token)
    """

    def __init__(self, source: str):
        self.source = source
        self.position = 0

    def __iter__(self) -> Iterator[Token]:
        """Iterate over all tokens in the source."""
        while True:
            token = self.next_token()
            if token is None:
                break
            yield token

    def next_token(self) -> Token | None:
        """Get the next token from the source, or None at end of input."""
        while self.position < len(self.source):
            for pattern, token_type in _COMPILED_PATTERNS:
                match = pattern.match(self.source, self.position)
                if match:
                    break
            else:
                raise LexerError(
                    ErrorKind.UNKNOWN_TOKEN,
                    f"Unknown token '{self.source[self.position]}'",
                )

            value = match.group()
            self.position = match.end()

            if token_type is None:
                continue
            if token_type == TokenType.NUMBER:
                return Token(TokenType.NUMBER, self._to_number(value))
            if token_type == TokenType.OPERATOR:
                return Token(TokenType.OPERATOR, OpKind.from_symbol(value))
            return Token(token_type)

        return None

    def _to_number(self, digits: str) -> int:
        """Convert a digit run, rejecting leading zeroes (``0`` alone is fine)."""
        if len(digits) > 1 and digits[0] == "0":
            raise LexerError(
                ErrorKind.LEADING_ZERO,
                f"Cannot have leading zeroes for numbers: '{digits}'",
            )
        # Length check first: int() refuses very long digit strings.
        if len(digits) > _MAX_DIGITS or int(digits) > INT_MAX:
            shown = digits if len(digits) <= 30 else f"{digits[:20]}..."
            raise LexerError(
                ErrorKind.NUMBER_OUT_OF_RANGE,
                f"Number does not fit in a 64-bit integer: '{shown}'",
            )
        return int(digits)

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source and return the list of tokens."""
        return list(self)


def lex(source: str) -> list[Token]:
    """Convenience function to tokenize an expression string.

    Raises:
        LexerError: On the first unknown character or malformed number
    """
    return Lexer(source).tokenize()
