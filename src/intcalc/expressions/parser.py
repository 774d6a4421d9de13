"""Parser for integer arithmetic expressions.

Converts a list of tokens into an expression tree, one token of lookahead at
a time.

Operator Precedence (lowest to highest):
1. + -
2. * /
3. ^
4. numbers, parenthesized groups, unary + and -

Every level is left-associative, exponentiation included: ``2^2^2`` is
``(2^2)^2``.
"""

from dataclasses import replace
from typing import Iterable

from intcalc.expressions.errors import ErrorKind, ExpressionError
from intcalc.expressions.lexer import Token, TokenType
from intcalc.expressions.operators import OpKind
from intcalc.expressions.tree import (
    BinaryOp,
    ExpressionNode,
    Literal,
    binary,
    unary,
)


class ParseError(ExpressionError):
    """Error during parsing."""


class Parser:
    """Precedence-aware recursive descent parser.

    Usage:
        parser = Parser(lex("3 - 4 * 5"))
        tree = parser.parse()

    ``max_depth`` bounds parenthesis nesting; ``None`` leaves it unbounded.
    """

    def __init__(self, tokens: Iterable[Token], max_depth: int | None = None):
        self.tokens = list(tokens)
        self.position = 0
        self.depth = 0
        self.max_depth = max_depth

    def parse(self) -> ExpressionNode:
        """Parse the tokens and return the tree root.

        An empty token list parses to ``Literal(0)``.
        """
        if not self.tokens:
            return Literal(0)

        try:
            return self._parse_expression()
        except RecursionError:
            # Only parenthesis nesting recurses.
            raise ParseError(
                ErrorKind.NESTING_TOO_DEEP, "Parentheses are nested too deeply"
            ) from None

    # -------------------------------------------------------------------------
    # Helper methods
    # -------------------------------------------------------------------------

    def _current(self) -> Token | None:
        """Get current token, or None at end of input."""
        if self.position >= len(self.tokens):
            return None
        return self.tokens[self.position]

    def _advance(self) -> Token:
        """Consume and return current token."""
        token = self.tokens[self.position]
        self.position += 1
        return token

    def _match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        token = self._current()
        return token is not None and token.type in types

    def _follows_operator(self) -> bool:
        """Whether the token just consumed was an operator."""
        return (
            self.position > 0
            and self.tokens[self.position - 1].type == TokenType.OPERATOR
        )

    # -------------------------------------------------------------------------
    # Parsing methods
    # -------------------------------------------------------------------------

    def _parse_expression(self) -> ExpressionNode:
        """Parse ``operand (binop operand)*`` up to end of input or ``)``."""
        operands = [self._parse_operand()]
        operators: list[OpKind] = []

        while True:
            token = self._current()
            if token is None:
                break

            if token.type == TokenType.OPERATOR:
                self._advance()
                operators.append(token.value)
                operands.append(self._parse_operand())
                continue

            if token.type == TokenType.RPAREN:
                if self.depth == 0:
                    raise ParseError(
                        ErrorKind.UNEXPECTED_CLOSE_PARENTHESIS,
                        "Unexpected ')' without a matching '('",
                    )
                break

            raise ParseError(
                ErrorKind.MALFORMED_EXPRESSION,
                "Expected an operator between two values",
            )

        # Folding from the right hands each operand a subtree that already
        # covers everything to its right.
        tree = operands[-1]
        for operand, operator in zip(reversed(operands[:-1]), reversed(operators)):
            tree = self._reconcile(operand, operator, tree)
        return tree

    def _reconcile(
        self, left: ExpressionNode, operator: OpKind, right: ExpressionNode
    ) -> ExpressionNode:
        """Insert ``left operator ...`` into the already-built ``right`` subtree.

        If the root of ``right`` binds tighter than ``operator`` it nests whole
        under the new node. Otherwise the new node replaces the first node on
        the left spine of ``right`` that binds tighter than ``operator``, which
        groups equal precedences left to right.
        """
        spine: list[BinaryOp] = []
        node = right
        while node.precedence <= operator.precedence:
            spine.append(node)
            node = node.left

        result: ExpressionNode = binary(operator, left, node)
        for parent in reversed(spine):
            result = BinaryOp(parent.operator, result, parent.right)
        return result

    def _parse_operand(self) -> ExpressionNode:
        """Parse ``unary_prefix* primary``."""
        prefixes: list[OpKind] = []

        while self._match(TokenType.OPERATOR):
            operator = self._current().value
            if not operator.is_unary_prefix:
                if self._follows_operator():
                    raise ParseError(
                        ErrorKind.INVALID_UNARY_OPERATOR,
                        f"'{operator.symbol}' cannot be used as a unary operator",
                    )
                raise ParseError(
                    ErrorKind.MALFORMED_EXPRESSION,
                    f"Expected a value before '{operator.symbol}'",
                )
            prefixes.append(operator)
            self._advance()

        node = self._parse_primary()
        for operator in reversed(prefixes):
            node = unary(operator, node)
        return node

    def _parse_primary(self) -> ExpressionNode:
        """Parse a number or a parenthesized group."""
        token = self._current()

        if token is None:
            if self.depth > 0:
                raise ParseError(
                    ErrorKind.UNCLOSED_PARENTHESIS, "Missing ')' at end of expression"
                )
            raise ParseError(
                ErrorKind.MALFORMED_EXPRESSION, "Expected a value at end of expression"
            )

        if token.type == TokenType.NUMBER:
            self._advance()
            return Literal(token.value)

        if token.type == TokenType.LPAREN:
            return self._parse_group()

        if self.depth == 0:
            raise ParseError(
                ErrorKind.UNEXPECTED_CLOSE_PARENTHESIS,
                "Unexpected ')' without a matching '('",
            )
        raise ParseError(ErrorKind.MALFORMED_EXPRESSION, "Expected a value before ')'")

    def _parse_group(self) -> ExpressionNode:
        """Parse ``'(' expr ')'``; the result is never re-split."""
        self._advance()
        self.depth += 1
        if self.max_depth is not None and self.depth > self.max_depth:
            raise ParseError(
                ErrorKind.NESTING_TOO_DEEP,
                f"Parentheses are nested deeper than {self.max_depth} levels",
            )

        expr = self._parse_expression()

        if not self._match(TokenType.RPAREN):
            raise ParseError(
                ErrorKind.UNCLOSED_PARENTHESIS, "Missing ')' at end of expression"
            )
        self._advance()
        self.depth -= 1

        if isinstance(expr, BinaryOp):
            return replace(expr, grouped=True)
        return expr


def parse(tokens: Iterable[Token], max_depth: int | None = None) -> ExpressionNode:
    """Convenience function to parse a token list.

    Args:
        tokens: Tokens produced by the lexer
        max_depth: Optional bound on parenthesis nesting

    Returns:
        The tree root node
    """
    return Parser(tokens, max_depth).parse()
