"""Wrappers around the external tools the initializer shells out to."""

from repokit.external.git import Git
from repokit.external.github import GitHubCLI
from repokit.external.runner import CommandResult, CommandRunner
from repokit.external.venv import VirtualEnv

__all__ = [
    "CommandResult",
    "CommandRunner",
    "Git",
    "GitHubCLI",
    "VirtualEnv",
]
