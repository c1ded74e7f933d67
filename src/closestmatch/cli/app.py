"""Main CLI application."""

from __future__ import annotations

import typer

from closestmatch import __version__
from closestmatch.cli import config, match
from closestmatch.cli.context import CLIContext
from closestmatch.infrastructure.logging import configure_logging

# Main application
app = typer.Typer(
    name="closestmatch",
    help="Edit distance and closest-match lookup for strings.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Matching commands live at the top level, settings as a group
app.command("distance")(match.distance_command)
app.command("find")(match.find)
app.command("explain")(match.explain)
app.add_typer(config.app, name="config")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"closestmatch {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - handled by callback
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print results and errors.",
    ),
) -> None:
    """closestmatch: find the closest string by edit distance.

    Compare texts with Levenshtein distance and pick the best match
    from a list of candidates.
    """
    ctx = CLIContext.get()
    ctx.verbose = verbose
    ctx.quiet = quiet

    configure_logging(debug=verbose)
