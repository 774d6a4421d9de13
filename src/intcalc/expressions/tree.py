"""Expression tree shared by the parser and the evaluator.

A tree is built once per line, evaluated, then dropped. Nodes are never
mutated after construction; the parser builds replacements with
``dataclasses.replace`` instead.
"""

from dataclasses import dataclass, field

from intcalc.expressions.operators import GROUP_PRECEDENCE, OpKind


@dataclass(frozen=True)
class ExpressionNode:
    """Base class for tree nodes."""

    @property
    def precedence(self) -> int:
        return GROUP_PRECEDENCE


@dataclass(frozen=True)
class Literal(ExpressionNode):
    """An integer literal."""
    value: int


@dataclass(frozen=True)
class BinaryOp(ExpressionNode):
    """Application of an operator.

    ``left is None`` marks a unary application of ``+`` or ``-``. A node
    produced from a parenthesized group is flagged ``grouped`` so it is never
    re-split by the operators around it; the flag is not part of equality.
    """
    operator: OpKind
    left: ExpressionNode | None
    right: ExpressionNode | None
    grouped: bool = field(default=False, compare=False, repr=False)

    @property
    def is_unary(self) -> bool:
        return self.left is None

    @property
    def precedence(self) -> int:
        if self.grouped or self.is_unary:
            return GROUP_PRECEDENCE
        return self.operator.precedence


def leaf(value: int) -> Literal:
    return Literal(value)


def binary(
    operator: OpKind, left: ExpressionNode | None, right: ExpressionNode | None
) -> BinaryOp:
    return BinaryOp(operator, left, right)


def unary(operator: OpKind, operand: ExpressionNode) -> BinaryOp:
    """Prefix application: ``-x`` is ``BinaryOp(SUBTRACT, None, x)``."""
    return BinaryOp(operator, None, operand)
