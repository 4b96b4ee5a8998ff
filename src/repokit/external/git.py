"""Git operations for a freshly created project directory."""

from __future__ import annotations

from pathlib import Path

from repokit.external.runner import CommandResult, CommandRunner


class Git:
    """Thin git client bound to one working tree."""

    def __init__(self, runner: CommandRunner, workdir: Path) -> None:
        self.runner = runner
        self.workdir = workdir

    def init(self, branch: str) -> CommandResult:
        return self.runner.run(
            ["git", "init", f"--initial-branch={branch}"], cwd=self.workdir
        )

    def is_repository(self) -> bool:
        """True when the .git metadata directory exists."""
        return (self.workdir / ".git").is_dir()

    def add_all(self) -> CommandResult:
        return self.runner.run(["git", "add", "."], cwd=self.workdir)

    def commit(self, message: str) -> CommandResult:
        return self.runner.run(["git", "commit", "-m", message], cwd=self.workdir)

    def push(self, remote: str, branch: str) -> CommandResult:
        return self.runner.run(
            ["git", "push", "-u", remote, branch], cwd=self.workdir
        )
