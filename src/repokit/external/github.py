"""GitHub access through the gh command-line tool.

Only exit statuses are interpreted, plus the URL returned by
``gh repo view --json url``.
"""

from __future__ import annotations

from pathlib import Path

from repokit.external.runner import CommandResult, CommandRunner


class GitHubCLI:
    """Query, create, and delete repositories with gh."""

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner

    def is_authenticated(self) -> bool:
        return self.runner.run(["gh", "auth", "status"]).ok

    def repo_exists(self, name: str) -> bool:
        return self.runner.run(["gh", "repo", "view", name]).ok

    def delete_repo(self, name: str) -> CommandResult:
        return self.runner.run(["gh", "repo", "delete", name, "--yes"])

    def create_repo(self, name: str, source: Path, visibility: str) -> CommandResult:
        """Create the repository from a local source tree.

        gh adds the new repository as the ``origin`` remote of ``source``.
        """
        return self.runner.run(
            [
                "gh",
                "repo",
                "create",
                name,
                f"--{visibility}",
                f"--source={source}",
            ]
        )

    def repo_url(self, name: str) -> str | None:
        """Return the web URL of a repository, or None if gh cannot tell."""
        result = self.runner.run(
            ["gh", "repo", "view", name, "--json", "url", "--jq", ".url"]
        )
        if not result.ok:
            return None
        return result.stdout.strip() or None
