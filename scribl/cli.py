"""Command line entry point: `scribl FILE`.

Parses the file, prints the syntax tree, evaluates it against a fresh root
scope and prints the final bindings as JSON. Exits 1 on a parse error or a
hard evaluation error.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from scribl.config import get_log_level, get_max_depth
from scribl.errors import ScriblError
from scribl.interpreter import Interpreter
from scribl.reader.parser import parse_file


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Diagnostic log level (defaults to SCRIBL_LOG_LEVEL, else WARNING).",
)
def cli(path: Path, log_level: str | None) -> None:
    """Evaluate the Scribl program in PATH."""
    level = logging.getLevelName(log_level.upper()) if log_level else get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    click.echo(f"Parsing {path}...")
    try:
        tree = parse_file(path)
    except ScriblError as e:
        _fail(str(e))

    if tree.has_error:
        click.echo("Parse errors detected:", err=True)
        click.echo(str(tree), err=True)
        sys.exit(1)

    click.echo("Parse tree:")
    click.echo(str(tree))
    click.echo("")

    try:
        max_depth = get_max_depth()
    except ValueError as e:
        _fail(str(e))

    click.echo("Executing...")
    try:
        result = Interpreter(max_depth=max_depth).run(tree)
    except ScriblError as e:
        _fail(str(e))

    click.echo("")
    click.echo("Result:")
    click.echo(json.dumps(result.bindings(), indent=2))


if __name__ == "__main__":
    cli()
