"""repokit CLI entry point."""

import typer

from repokit import __version__
from repokit.cli.catalog_cmd import catalog
from repokit.cli.new_cmd import new

app = typer.Typer(
    name="repokit",
    help="Catalog Python files and bootstrap GitHub-backed projects",
    no_args_is_help=True,
)

# Register subcommands
app.command()(catalog)
app.command()(new)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"repokit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Catalog Python files and bootstrap GitHub-backed projects."""
