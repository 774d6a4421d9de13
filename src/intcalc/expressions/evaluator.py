"""Evaluator for integer arithmetic expression trees.

Walks the tree post-order (children before their parent) and folds it to an
integer. The walk keeps its own stack, so tall trees such as long flat
``1 + 1 + ...`` chains do not consume interpreter stack. The tree is only
read, so the same tree may be evaluated any number of times.

Every intermediate value must fit a signed 64-bit integer.
"""

from intcalc.expressions.errors import ErrorKind, ExpressionError
from intcalc.expressions.operators import INT_MAX, INT_MIN, OpKind
from intcalc.expressions.tree import BinaryOp, ExpressionNode, Literal


class EvaluationError(ExpressionError):
    """Arithmetic error during evaluation."""


class MalformedTreeError(RuntimeError):
    """A tree shape the parser never produces; signals a parser defect."""


class Evaluator:
    """Evaluates an expression tree.

    Usage:
        evaluator = Evaluator()
        result = evaluator.evaluate(tree)
    """

    def evaluate(self, node: ExpressionNode) -> int:
        """Evaluate a tree and return the result."""
        values: list[int] = []
        # (node, children already evaluated)
        pending: list[tuple[ExpressionNode, bool]] = [(node, False)]

        while pending:
            current, ready = pending.pop()

            if isinstance(current, Literal):
                values.append(current.value)
                continue

            if not isinstance(current, BinaryOp):
                raise MalformedTreeError(f"Unknown node type: {type(current).__name__}")
            if current.right is None:
                raise MalformedTreeError(
                    f"'{current.operator.symbol}' node has no right operand"
                )

            if ready:
                right = values.pop()
                if current.is_unary:
                    values.append(self._apply_unary(current.operator, right))
                else:
                    left = values.pop()
                    values.append(self._apply_binary(current.operator, left, right))
                continue

            # Left is pushed last so it is evaluated first.
            pending.append((current, True))
            pending.append((current.right, False))
            if current.left is not None:
                pending.append((current.left, False))

        return values.pop()

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def _apply_unary(self, op: OpKind, operand: int) -> int:
        """Apply a prefix operator with an implicit left operand of 0."""
        if op == OpKind.ADD:
            return operand
        if op == OpKind.SUBTRACT:
            return self._checked(-operand, f"-({operand})")
        raise MalformedTreeError(f"'{op.symbol}' cannot be applied as a unary operator")

    def _apply_binary(self, op: OpKind, left: int, right: int) -> int:
        if op == OpKind.ADD:
            return self._checked(left + right, f"{left} + {right}")
        if op == OpKind.SUBTRACT:
            return self._checked(left - right, f"{left} - {right}")
        if op == OpKind.MULTIPLY:
            return self._checked(left * right, f"{left} * {right}")
        if op == OpKind.DIVIDE:
            return self._divide(left, right)
        if op == OpKind.EXPONENT:
            return self._power(left, right)

        raise MalformedTreeError(f"Unknown operator: {op}")

    # -------------------------------------------------------------------------
    # Helper methods
    # -------------------------------------------------------------------------

    def _checked(self, value: int, description: str) -> int:
        if value < INT_MIN or value > INT_MAX:
            raise EvaluationError(
                ErrorKind.INTEGER_OVERFLOW,
                f"Integer overflow in {description}",
            )
        return value

    def _divide(self, left: int, right: int) -> int:
        """Integer division truncating toward zero."""
        if right == 0:
            raise EvaluationError(ErrorKind.DIVISION_BY_ZERO, "Division by zero")
        quotient = abs(left) // abs(right)
        if (left < 0) != (right < 0):
            quotient = -quotient
        return self._checked(quotient, f"{left} / {right}")

    def _power(self, base: int, exponent: int) -> int:
        if exponent < 0:
            raise EvaluationError(
                ErrorKind.NEGATIVE_EXPONENT,
                f"Cannot raise to a negative exponent ({exponent})",
            )
        # |base| >= 2 with an exponent of 64 or more never fits 64 bits.
        if abs(base) >= 2 and exponent >= 64:
            raise EvaluationError(
                ErrorKind.INTEGER_OVERFLOW,
                f"Integer overflow in {base} ^ {exponent}",
            )
        return self._checked(base**exponent, f"{base} ^ {exponent}")


def evaluate(tree: ExpressionNode) -> int:
    """Convenience function to evaluate a tree.

    Raises:
        EvaluationError: On division by zero, a negative exponent or a value
            outside the signed 64-bit range
    """
    return Evaluator().evaluate(tree)
