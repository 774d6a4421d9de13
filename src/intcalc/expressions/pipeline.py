"""The lex -> parse -> evaluate pipeline for one input line."""

import logging

from intcalc.config import CalculatorConfig
from intcalc.expressions.errors import ExpressionError
from intcalc.expressions.evaluator import evaluate
from intcalc.expressions.lexer import lex
from intcalc.expressions.parser import parse

logger = logging.getLogger(__name__)


def run(text: str, config: CalculatorConfig | None = None) -> int:
    """Evaluate one line of text.

    This is the main entry point for hosts such as the REPL. The first failing
    stage's error propagates; nothing is kept between calls.

    Args:
        text: The expression, typically already stripped
        config: Settings; defaults to ``CalculatorConfig()``

    Returns:
        The integer result (0 for an empty line)

    Raises:
        LexerError, ParseError, EvaluationError: All subclasses of
        ExpressionError

    Example:
        run("3 - 4 * 5 + 3 ^ 2")
        # -8
    """
    config = config or CalculatorConfig()
    try:
        tokens = lex(text)
        logger.debug("Lexed %d token(s) from %r", len(tokens), text)
        tree = parse(tokens, max_depth=config.depth_limit)
        logger.debug("Parsed %r", text)
        result = evaluate(tree)
    except ExpressionError as e:
        logger.info("Rejected %r: %s (%s)", text, e.message, e.kind.value)
        raise
    logger.debug("Evaluated %r to %d", text, result)
    return result
