"""One-shot commands: evaluate or tokenize a single expression."""

import click

from intcalc.config import CalculatorConfig
from intcalc.expressions import ExpressionError, lex, run


@click.command("eval")
@click.argument("expression")
@click.pass_obj
def eval_command(config: CalculatorConfig, expression: str):
    """Evaluate EXPRESSION and print the integer result."""
    try:
        result = run(expression.strip(), config)
    except ExpressionError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        raise SystemExit(1)
    click.echo(str(result))


@click.command("tokens")
@click.argument("expression")
def tokens_command(expression: str):
    """Print the tokens of EXPRESSION, one per line."""
    try:
        tokens = lex(expression)
    except ExpressionError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        raise SystemExit(1)
    for token in tokens:
        click.echo(token.display_name)
