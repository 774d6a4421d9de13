"""intcalc: integer arithmetic expression evaluator."""

from intcalc.expressions import run

__version__ = "0.1.0"

__all__ = ["run", "__version__"]
