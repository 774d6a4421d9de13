"""Error taxonomy shared by the lexer, parser and evaluator."""

from enum import Enum


class ErrorKind(Enum):
    """Flat tags identifying why an expression was rejected."""

    # Lexer
    UNKNOWN_TOKEN = "unknown_token"
    LEADING_ZERO = "leading_zero"
    NUMBER_OUT_OF_RANGE = "number_out_of_range"

    # Parser
    UNCLOSED_PARENTHESIS = "unclosed_parenthesis"
    UNEXPECTED_CLOSE_PARENTHESIS = "unexpected_close_parenthesis"
    INVALID_UNARY_OPERATOR = "invalid_unary_operator"
    MALFORMED_EXPRESSION = "malformed_expression"
    NESTING_TOO_DEEP = "nesting_too_deep"

    # Evaluator
    DIVISION_BY_ZERO = "division_by_zero"
    NEGATIVE_EXPONENT = "negative_exponent"
    INTEGER_OVERFLOW = "integer_overflow"


class ExpressionError(Exception):
    """Base class for every error raised while evaluating a line.

    Attributes:
        kind: The error tag
        message: Human-readable description
    """

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)
