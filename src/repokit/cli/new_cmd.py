"""repokit new -- create a local project and publish it to GitHub.

Validates the name, resolves local and remote name conflicts
interactively, then scaffolds, commits, creates the GitHub repository,
and pushes. Exits 0 on success or when the operator cancels.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from repokit.cli.output import configure_logging, console, print_error
from repokit.conflicts.prompts import ConsolePrompter
from repokit.errors import RepokitError, SetupCancelled
from repokit.external.runner import CommandRunner
from repokit.initializer import ProjectInitializer
from repokit.models.config import load_config
from repokit.models.project import ProjectTarget, validate_project_name

USAGE = (
    "Usage: repokit new <project_name>\n"
    "Creates a new Python project with Git and GitHub integration"
)


def new(
    project_name: Optional[str] = typer.Argument(None, help="Name of the project to create"),
    projects_dir: Optional[Path] = typer.Option(
        None, "--projects-dir", help="Parent directory for the project (overrides config)"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Config file (default: ~/.config/repokit/config.yaml)"
    ),
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Show debug logging"),
) -> None:
    """Create a new Python project with Git and GitHub integration."""
    if project_name is None:
        console.print(USAGE, markup=False)
        raise typer.Exit(code=1)

    configure_logging(verbose)

    try:
        validate_project_name(project_name)
        config = load_config(config_path)
        target = ProjectTarget(
            name=project_name,
            projects_dir=(projects_dir or config.projects_dir).expanduser(),
        )
        initializer = ProjectInitializer(
            config,
            target,
            runner=CommandRunner(),
            prompter=ConsolePrompter(console),
            console=console,
        )
        initializer.run()
    except SetupCancelled:
        console.print("Project setup cancelled.")
        raise typer.Exit(code=0)
    except RepokitError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code)
