"""repokit catalog -- list Python files into a text file."""

from __future__ import annotations

from pathlib import Path

import typer

from repokit.catalog.walker import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_OUTPUT,
    DEFAULT_SUFFIX,
    write_catalog,
)
from repokit.cli.output import console


def catalog(
    root: Path = typer.Option(Path("."), "--root", help="Directory to walk"),
    suffix: str = typer.Option(DEFAULT_SUFFIX, "--suffix", help="Filename suffix to match"),
    max_depth: int = typer.Option(
        DEFAULT_MAX_DEPTH, "--max-depth", help="Directory levels to descend (root is 1)"
    ),
    output: Path = typer.Option(Path(DEFAULT_OUTPUT), "--output", "-o", help="Catalog file to (over)write"),
) -> None:
    """Catalog Python files in the current directory and one level below."""
    write_catalog(root, output, suffix=suffix, max_depth=max_depth)
    console.print(f"Python scripts have been cataloged in {output}", markup=False)
