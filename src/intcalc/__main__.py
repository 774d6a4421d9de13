"""Run the intcalc CLI.

Usage:
    python -m intcalc eval "3 - 4 * 5"
    python -m intcalc repl
"""

from intcalc.cli.main import cli


if __name__ == "__main__":
    cli()
