"""Interactive read-evaluate-print loop."""

import click

from intcalc.config import CalculatorConfig
from intcalc.expressions import ExpressionError, run


@click.command()
@click.pass_obj
def repl(config: CalculatorConfig):
    """Evaluate expressions read from stdin, one per line.

    A rejected line prints its error and the loop carries on; end of input
    ends the session.
    """
    with click.open_file("-") as stdin:
        while True:
            click.echo(config.prompt, nl=False)
            line = stdin.readline()
            if not line:
                click.echo()
                break

            line = line.strip()
            if not line:
                continue

            try:
                click.echo(str(run(line, config)))
            except ExpressionError as e:
                click.echo(click.style(e.message, fg="red"))
