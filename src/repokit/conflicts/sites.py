"""The two places a project name can collide: disk and GitHub."""

from __future__ import annotations

from abc import ABC, abstractmethod

from repokit.conflicts.destructive import (
    delete_remote_repository,
    destroy_local_directory,
)
from repokit.conflicts.prompts import Prompter
from repokit.external.github import GitHubCLI
from repokit.models.project import ProjectTarget


def _confirmed(answer: str) -> bool:
    return answer.strip() in ("y", "Y")


class ConflictSite(ABC):
    """One decision point of the conflict menu.

    Subclasses supply the existence check, the destructive resolution,
    and the wording shown to the operator.
    """

    options: tuple[str, str, str]
    name_taken_message: str

    @abstractmethod
    def exists(self, target: ProjectTarget) -> bool:
        """True if target's current name is already taken here."""

    @abstractmethod
    def destroy(self, target: ProjectTarget, prompter: Prompter) -> bool:
        """Remove the existing resource.

        Returns:
            True once the resource is gone, False if the operator backed out.
        """

    @abstractmethod
    def conflict_message(self, target: ProjectTarget) -> str:
        """Headline shown above the menu."""


class LocalDirectorySite(ConflictSite):
    """A directory named after the project already exists in projects_dir."""

    options = (
        "Delete existing local project directory",
        "Choose a different project name",
        "Exit project setup",
    )
    name_taken_message = "The new project name directory is also taken. Try again."

    def exists(self, target: ProjectTarget) -> bool:
        return target.path.is_dir()

    def destroy(self, target: ProjectTarget, prompter: Prompter) -> bool:
        answer = prompter.ask(
            "Are you sure you want to delete the existing directory? (y/N): "
        )
        if not _confirmed(answer):
            prompter.say("Deletion cancelled.")
            return False
        destroy_local_directory(target.path)
        return True

    def conflict_message(self, target: ProjectTarget) -> str:
        return f"A directory with the name '{target.name}' already exists locally."


class RemoteRepositorySite(ConflictSite):
    """A GitHub repository with the project's name already exists."""

    options = (
        "Overwrite existing repository",
        "Rename the project",
        "Cancel project setup",
    )
    name_taken_message = "The new project name is also taken. Try again."

    def __init__(self, github: GitHubCLI, confirm_delete: bool = False) -> None:
        self.github = github
        self.confirm_delete = confirm_delete

    def exists(self, target: ProjectTarget) -> bool:
        return self.github.repo_exists(target.name)

    def destroy(self, target: ProjectTarget, prompter: Prompter) -> bool:
        if self.confirm_delete:
            answer = prompter.ask(
                "Are you sure you want to delete the existing repository? (y/N): "
            )
            if not _confirmed(answer):
                prompter.say("Deletion cancelled.")
                return False
        delete_remote_repository(self.github, target.name)
        return True

    def conflict_message(self, target: ProjectTarget) -> str:
        return f"Repository {target.name} already exists on GitHub."
