"""Project initializer: conflict checks, scaffolding, and publishing.

Steps run strictly in order. Conflict resolution happens first (local
directory, then gh authentication, then the GitHub repository); after
that there is no further branching. Any failing step raises a
RepokitError and nothing already created is rolled back.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

from repokit.conflicts.prompts import Prompter
from repokit.conflicts.resolver import ConflictResolver
from repokit.conflicts.sites import LocalDirectorySite, RemoteRepositorySite
from repokit.errors import (
    AuthRequiredError,
    EnvironmentSetupError,
    ProjectDirectoryError,
    PushError,
    RemoteCreateError,
    SetupCancelled,
    VcsCommitError,
    VcsInitError,
)
from repokit.external.git import Git
from repokit.external.github import GitHubCLI
from repokit.external.runner import CommandResult, CommandRunner
from repokit.external.venv import VirtualEnv
from repokit.models.config import RepokitConfig
from repokit.models.project import ProjectTarget, ResolutionState
from repokit.scaffold.init import scaffold_project

logger = logging.getLogger(__name__)


def _detail(result: CommandResult) -> str:
    text = (result.stderr or result.stdout).strip()
    return f": {text}" if text else "."


class ProjectInitializer:
    """Create a local project and its GitHub repository.

    Args:
        config: User configuration.
        target: Project name and location; renamed in place on conflict.
        runner: Executes git, gh, and pip.
        prompter: Answers the conflict menus.
        console: Where progress and the final summary are printed.
    """

    def __init__(
        self,
        config: RepokitConfig,
        target: ProjectTarget,
        runner: CommandRunner,
        prompter: Prompter,
        console: Console | None = None,
    ) -> None:
        self.config = config
        self.target = target
        self.runner = runner
        self.prompter = prompter
        self.console = console or Console(highlight=False)
        self.github = GitHubCLI(runner)
        self.venv: VirtualEnv | None = None

    def run(self) -> None:
        """Execute every step.

        Raises:
            SetupCancelled: Operator chose to cancel at a conflict menu.
            RepokitError: A step failed.
        """
        self.resolve_conflicts()

        path = self.target.path
        logger.debug("creating project %s at %s", self.target.name, path)
        self.create_directory()

        git = Git(self.runner, path)
        self.init_repository(git)

        self.console.print(f"[bold]Creating project files for {escape(self.target.name)}[/bold]")
        scaffold_project(path, self.target.name, venv_dir=self.config.venv_dir)

        venv = VirtualEnv(self.runner, path / self.config.venv_dir, python=self.config.python)
        self.venv = venv
        self.create_environment(venv)
        with venv.activated():
            self.install_dependencies(venv)
            self.commit(git)
            self.create_remote()
            self.push(git)
            self.print_summary()

    def resolve_conflicts(self) -> None:
        """Local check, then the auth gate, then the remote check."""
        local = ConflictResolver(LocalDirectorySite(), self.prompter)
        if local.resolve(self.target) is ResolutionState.ABORTED:
            raise SetupCancelled()

        self.check_auth()

        remote_site = RemoteRepositorySite(
            self.github, confirm_delete=self.config.confirm_remote_delete
        )
        remote = ConflictResolver(remote_site, self.prompter)
        if remote.resolve(self.target) is ResolutionState.ABORTED:
            raise SetupCancelled()

    def check_auth(self) -> None:
        if not self.github.is_authenticated():
            raise AuthRequiredError()

    def create_directory(self) -> None:
        path = self.target.path
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ProjectDirectoryError(
                f"Failed to create project directory {path}: {exc.strerror or exc}"
            ) from exc

    def init_repository(self, git: Git) -> None:
        result = git.init(self.config.default_branch)
        if not result.ok:
            raise VcsInitError(f"Failed to initialize Git repository{_detail(result)}")
        if not git.is_repository():
            raise VcsInitError("Git repository was not created successfully.")

    def create_environment(self, venv: VirtualEnv) -> None:
        result = venv.create()
        if not result.ok:
            raise EnvironmentSetupError(
                f"Failed to create virtual environment{_detail(result)}"
            )

    def install_dependencies(self, venv: VirtualEnv) -> None:
        """Install the configured packages and freeze them to requirements.txt."""
        if self.config.upgrade_pip:
            result = venv.upgrade_pip()
            if not result.ok:
                raise EnvironmentSetupError(f"Failed to upgrade pip{_detail(result)}")

        if self.config.dependencies:
            self.console.print(
                f"Installing {len(self.config.dependencies)} packages into {venv.path.name}/"
            )
            result = venv.install(self.config.dependencies)
            if not result.ok:
                raise EnvironmentSetupError(
                    f"Failed to install dependencies{_detail(result)}"
                )

        result = venv.freeze()
        if not result.ok:
            raise EnvironmentSetupError(f"Failed to freeze dependencies{_detail(result)}")
        (self.target.path / "requirements.txt").write_text(result.stdout, encoding="utf-8")

    def commit(self, git: Git) -> None:
        result = git.add_all()
        if not result.ok:
            raise VcsCommitError(f"Failed to stage project files{_detail(result)}")
        message = self.config.commit_message.format(name=self.target.name)
        result = git.commit(message)
        if not result.ok:
            raise VcsCommitError(f"Failed to create initial commit{_detail(result)}")

    def create_remote(self) -> None:
        result = self.github.create_repo(
            self.target.name, self.target.path, self.config.visibility
        )
        if not result.ok:
            raise RemoteCreateError(
                "Failed to create GitHub repository. "
                "Please check your GitHub authentication and network connection."
            )

    def push(self, git: Git) -> None:
        result = git.push("origin", self.config.default_branch)
        if not result.ok:
            raise PushError(f"Failed to push to GitHub repository{_detail(result)}")

    def repository_url(self) -> str:
        if self.config.github_username:
            return f"https://github.com/{self.config.github_username}/{self.target.name}"
        return self.github.repo_url(self.target.name) or self.target.name

    def print_summary(self) -> None:
        venv_dir = self.config.venv_dir
        self.console.print(
            f"[green][bold]Project '{escape(self.target.name)}' setup complete![/bold][/green]"
        )
        self.console.print(f"Repository: {self.repository_url()}", markup=False)
        self.console.print()
        self.console.print("Next steps:")
        self.console.print(f"1. Activate virtual environment: source {venv_dir}/bin/activate")
        self.console.print("2. Install dependencies: pip install -r requirements.txt")
        self.console.print("3. Start developing!")
