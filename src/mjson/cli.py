"""
``mj``: command line JSON prettifier.

Reads a JSON document from a file (or stdin), parses it, and prints it
indented or minified, optionally with ANSI colors.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from . import JSONDecodeError
from . import RenderOptions
from . import parse
from . import render

log = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="mj - command line JSON minimum prettier",
)


def _read_input(path: Optional[Path]) -> str:
    if path is None:
        log.debug("Reading JSON from stdin")
        return sys.stdin.read()
    log.debug("Reading JSON from %s", path)
    return path.read_text(encoding="utf-8")


@app.command()
def main(
    file: Optional[Path] = typer.Argument(
        None, help="A JSON file. Reads stdin when omitted."
    ),
    color: bool = typer.Option(
        False, "--color", "-c", help="Color JSON output."
    ),
    minimize: bool = typer.Option(
        False, "--minimize", "-m", help="Minimize JSON output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug information to stderr."
    ),
) -> None:
    """Pretty-print (or minify) a JSON document."""
    if verbose:
        logging.basicConfig(format="%(name)s: %(message)s", stream=sys.stderr)
        logging.getLogger("mjson").setLevel(logging.DEBUG)

    try:
        text = _read_input(file)
    except (OSError, UnicodeDecodeError) as exc:
        typer.echo(f"error: can't open a file {file}: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    try:
        value = parse(text)
    except JSONDecodeError as exc:
        typer.echo(f"error: failed to parse json: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    # click strips ANSI sequences on non-tty output unless color is forced
    output = render(value, RenderOptions(minify=minimize, color=color))
    typer.echo(output, color=color)


if __name__ == "__main__":
    app()
