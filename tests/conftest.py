"""Shared fakes for initializer and conflict-resolution tests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path

import pytest

from repokit.conflicts.prompts import Prompter
from repokit.external.runner import CommandResult, CommandRunner


def classify(argv: list[str]) -> str:
    """Reduce a command line to a short key like 'git init' or 'gh repo view'."""
    if argv[0] == "git":
        return f"git {argv[1]}"
    if argv[0] == "gh":
        return " ".join(argv[:3]) if argv[1] == "repo" else f"gh {argv[1]}"
    if argv[1:3] == ["-m", "venv"]:
        return "venv create"
    if argv[1:3] == ["-m", "pip"]:
        return f"pip {argv[3]}"
    return argv[0]


class FakeRunner(CommandRunner):
    """Records every command and simulates git, gh, and pip.

    ``git init`` creates the .git directory so the post-init check passes.
    Any key listed in ``fail`` returns exit status 1.
    """

    def __init__(
        self,
        fail: Sequence[str] = (),
        existing_repos: Sequence[str] = (),
        authenticated: bool = True,
        freeze_output: str = "pytest==8.0.0\n",
        create_git_dir: bool = True,
    ) -> None:
        self.fail = set(fail)
        self.existing_repos = set(existing_repos)
        self.authenticated = authenticated
        self.freeze_output = freeze_output
        self.create_git_dir = create_git_dir
        self.calls: list[tuple[list[str], Path | None, Mapping[str, str] | None]] = []

    def run(
        self,
        args: Sequence[str],
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        argv = [str(a) for a in args]
        self.calls.append((argv, cwd, env))
        key = classify(argv)

        if key in self.fail:
            return CommandResult(args=argv, returncode=1, stderr=f"{key} failed")

        if key == "git init" and self.create_git_dir and cwd is not None:
            (cwd / ".git").mkdir(exist_ok=True)
        elif key == "gh auth":
            return CommandResult(args=argv, returncode=0 if self.authenticated else 1)
        elif key == "gh repo view":
            name = argv[3]
            if "--json" in argv:
                return CommandResult(args=argv, returncode=0, stdout=f"https://github.com/me/{name}\n")
            return CommandResult(args=argv, returncode=0 if name in self.existing_repos else 1)
        elif key == "gh repo delete":
            self.existing_repos.discard(argv[3])
        elif key == "gh repo create":
            self.existing_repos.add(argv[3])
        elif key == "pip freeze":
            return CommandResult(args=argv, returncode=0, stdout=self.freeze_output)

        return CommandResult(args=argv, returncode=0)

    @property
    def keys(self) -> list[str]:
        return [classify(argv) for argv, _, _ in self.calls]

    def calls_for(self, key: str) -> list[tuple[list[str], Path | None, Mapping[str, str] | None]]:
        return [call for call in self.calls if classify(call[0]) == key]


class ScriptedPrompter(Prompter):
    """Answers prompts from a fixed list and records everything shown."""

    def __init__(self, answers: Sequence[str] = ()) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.messages: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self.answers.pop(0)

    def say(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def projects_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "projects"
    directory.mkdir()
    return directory
