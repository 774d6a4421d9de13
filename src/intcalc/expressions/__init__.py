"""Integer arithmetic expressions.

This module provides:
- Lexer: Tokenizes expression strings
- Parser: Produces an expression tree from tokens
- Evaluator: Folds the tree to an integer
- run: The three stages composed for one line
"""

from intcalc.expressions.errors import ErrorKind, ExpressionError
from intcalc.expressions.evaluator import (
    EvaluationError,
    Evaluator,
    MalformedTreeError,
    evaluate,
)
from intcalc.expressions.lexer import Lexer, LexerError, Token, TokenType, lex
from intcalc.expressions.operators import GROUP_PRECEDENCE, OpKind
from intcalc.expressions.parser import ParseError, Parser, parse
from intcalc.expressions.pipeline import run
from intcalc.expressions.tree import (
    BinaryOp,
    ExpressionNode,
    Literal,
    binary,
    leaf,
    unary,
)

__all__ = [
    # Errors
    "ErrorKind",
    "ExpressionError",
    # Operators
    "GROUP_PRECEDENCE",
    "OpKind",
    # Lexer
    "Lexer",
    "LexerError",
    "Token",
    "TokenType",
    "lex",
    # Tree
    "BinaryOp",
    "ExpressionNode",
    "Literal",
    "binary",
    "leaf",
    "unary",
    # Parser
    "ParseError",
    "Parser",
    "parse",
    # Evaluator
    "EvaluationError",
    "Evaluator",
    "MalformedTreeError",
    "evaluate",
    # Pipeline
    "run",
]
