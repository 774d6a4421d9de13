"""intcalc CLI entry point."""

import logging

import click

from intcalc.config import CalculatorConfig


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override INTCALC_LOG_LEVEL.",
)
@click.option(
    "--max-depth",
    default=None,
    type=click.IntRange(min=0),
    help="Maximum parenthesis nesting (0 for unbounded). Overrides INTCALC_MAX_DEPTH.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, max_depth: int | None):
    """intcalc: integer arithmetic expression evaluator."""
    try:
        config = CalculatorConfig.from_env()
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    if log_level is not None:
        config.log_level = log_level.upper()
    if max_depth is not None:
        config.max_depth = max_depth

    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Register subcommands
from intcalc.cli.expr_cmd import eval_command, tokens_command  # noqa: E402
from intcalc.cli.repl_cmd import repl  # noqa: E402

cli.add_command(eval_command)
cli.add_command(tokens_command)
cli.add_command(repl)
