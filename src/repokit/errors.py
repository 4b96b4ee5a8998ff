"""Exceptions raised by the project initializer.

Every fatal failure maps to one RepokitError subclass. The CLI layer
is the only place that turns these into console output and exit codes.
"""

from __future__ import annotations


class RepokitError(Exception):
    """Base exception for fatal initializer failures."""

    exit_code: int = 1


class ConfigError(RepokitError):
    """Config file could not be parsed or failed validation."""


class InvalidNameError(RepokitError):
    """Project name contains characters outside [a-zA-Z0-9_-]."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid project name '{name}'. "
            "Use only alphanumeric characters, underscores, and hyphens."
        )


class AuthRequiredError(RepokitError):
    """GitHub CLI is not authenticated."""

    def __init__(self) -> None:
        super().__init__(
            "GitHub CLI is not authenticated. Please run 'gh auth login' first."
        )


class ProjectDirectoryError(RepokitError):
    """The project directory could not be created or removed."""


class VcsInitError(RepokitError):
    """git init failed or left no .git directory behind."""


class VcsCommitError(RepokitError):
    """Staging or committing the initial files failed."""


class EnvironmentSetupError(RepokitError):
    """Virtual environment creation or package installation failed."""


class RemoteDeleteError(RepokitError):
    """Deleting a conflicting GitHub repository failed."""


class RemoteCreateError(RepokitError):
    """gh repo create reported an error."""


class PushError(RepokitError):
    """Pushing the initial commit failed."""


class SetupCancelled(Exception):
    """Operator chose to cancel at a conflict menu.

    Not an error: the CLI exits 0 when this is raised.
    """
