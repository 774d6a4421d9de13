"""Binary operators and their binding precedences."""

from enum import Enum

# Values are signed 64-bit integers.
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

# Precedence of a number, a parenthesized group or a unary application.
GROUP_PRECEDENCE = 4


class OpKind(Enum):
    """Arithmetic operators, valued by their source symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EXPONENT = "^"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    @property
    def is_unary_prefix(self) -> bool:
        """Whether the operator may also appear as a prefix (``-1``, ``+1``)."""
        return self in (OpKind.ADD, OpKind.SUBTRACT)

    @property
    def display_name(self) -> str:
        """Name used when dumping tokens (``Add``, ``Exponent``...)."""
        return self.name.capitalize()

    @classmethod
    def from_symbol(cls, symbol: str) -> "OpKind":
        return cls(symbol)


_PRECEDENCE = {
    OpKind.ADD: 1,
    OpKind.SUBTRACT: 1,
    OpKind.MULTIPLY: 2,
    OpKind.DIVIDE: 2,
    OpKind.EXPONENT: 3,
}
