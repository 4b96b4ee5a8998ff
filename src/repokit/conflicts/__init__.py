"""Conflict resolution for local directories and GitHub repositories."""

from repokit.conflicts.prompts import ConsolePrompter, Prompter
from repokit.conflicts.resolver import ConflictResolver
from repokit.conflicts.sites import (
    ConflictSite,
    LocalDirectorySite,
    RemoteRepositorySite,
)

__all__ = [
    "ConflictResolver",
    "ConflictSite",
    "ConsolePrompter",
    "LocalDirectorySite",
    "Prompter",
    "RemoteRepositorySite",
]
