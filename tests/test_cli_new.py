"""Tests for the repokit new CLI command."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from conftest import FakeRunner
from typer.testing import CliRunner

from repokit import __version__
from repokit.cli.main import app

runner = CliRunner()


def _args(projects_dir: Path, *extra: str) -> list[str]:
    return [
        "new",
        *extra,
        "--projects-dir",
        str(projects_dir),
        "--config",
        str(projects_dir.parent / "missing-config.yaml"),
    ]


class TestNewCommand:
    """Tests for exit codes and console output of repokit new."""

    def test_no_argument_prints_usage_and_exits_1(self) -> None:
        """Missing project name prints usage and exits 1."""
        result = runner.invoke(app, ["new"])
        assert result.exit_code == 1
        assert "Usage: repokit new <project_name>" in result.output

    def test_invalid_name_exits_1_without_touching_disk(self, projects_dir: Path) -> None:
        """A name with a space is rejected before anything is created."""
        fake = FakeRunner()
        with patch("repokit.cli.new_cmd.CommandRunner", return_value=fake):
            result = runner.invoke(app, _args(projects_dir, "bad name"))
        assert result.exit_code == 1
        assert list(projects_dir.iterdir()) == []
        assert fake.calls == []

    def test_success_exits_0(self, projects_dir: Path) -> None:
        """A clean run creates the project and exits 0."""
        fake = FakeRunner()
        with patch("repokit.cli.new_cmd.CommandRunner", return_value=fake):
            result = runner.invoke(app, _args(projects_dir, "demo"))
        assert result.exit_code == 0, result.output
        assert "setup complete" in result.output
        assert (projects_dir / "demo" / ".git").is_dir()
        assert fake.keys.count("git push") == 1

    def test_cancel_at_local_menu_exits_0(self, projects_dir: Path) -> None:
        """Choosing option 3 prints a cancellation message and exits 0."""
        (projects_dir / "demo").mkdir()
        fake = FakeRunner()
        with patch("repokit.cli.new_cmd.CommandRunner", return_value=fake):
            result = runner.invoke(app, _args(projects_dir, "demo"), input="7\n3\n")
        assert result.exit_code == 0
        assert "Invalid option. Please choose 1, 2, or 3." in result.output
        assert "Project setup cancelled." in result.output
        assert fake.calls == []

    def test_rename_at_local_menu(self, projects_dir: Path) -> None:
        """Renaming through stdin creates the project under the new name."""
        (projects_dir / "demo").mkdir()
        fake = FakeRunner()
        with patch("repokit.cli.new_cmd.CommandRunner", return_value=fake):
            result = runner.invoke(app, _args(projects_dir, "demo"), input="2\nfresh\n")
        assert result.exit_code == 0, result.output
        assert (projects_dir / "fresh" / ".git").is_dir()

    def test_cancel_at_remote_menu_exits_0(self, projects_dir: Path) -> None:
        """Option 3 at the GitHub menu exits 0 with no remote action."""
        fake = FakeRunner(existing_repos=["demo"])
        with patch("repokit.cli.new_cmd.CommandRunner", return_value=fake):
            result = runner.invoke(app, _args(projects_dir, "demo"), input="3\n")
        assert result.exit_code == 0
        assert "already exists on GitHub" in result.output
        assert "gh repo create" not in fake.keys

    def test_unauthenticated_exits_1(self, projects_dir: Path) -> None:
        """Missing gh authentication exits 1 without a remote prompt."""
        fake = FakeRunner(authenticated=False, existing_repos=["demo"])
        with patch("repokit.cli.new_cmd.CommandRunner", return_value=fake):
            result = runner.invoke(app, _args(projects_dir, "demo"))
        assert result.exit_code == 1
        assert "gh repo view" not in fake.keys

    def test_push_failure_exits_1(self, projects_dir: Path) -> None:
        """A failed push exits 1."""
        fake = FakeRunner(fail=["git push"])
        with patch("repokit.cli.new_cmd.CommandRunner", return_value=fake):
            result = runner.invoke(app, _args(projects_dir, "demo"))
        assert result.exit_code == 1

    def test_bad_config_exits_1(self, projects_dir: Path) -> None:
        """An invalid config file exits 1."""
        config = projects_dir.parent / "bad.yaml"
        config.write_text("nonsense_key: 1\n", encoding="utf-8")
        fake = FakeRunner()
        with patch("repokit.cli.new_cmd.CommandRunner", return_value=fake):
            result = runner.invoke(app, ["new", "demo", "--config", str(config)])
        assert result.exit_code == 1
        assert fake.calls == []

    def test_new_help(self) -> None:
        """repokit new --help prints usage."""
        result = runner.invoke(app, ["new", "--help"])
        assert result.exit_code == 0
        assert "GitHub" in result.output


class TestMainApp:
    """Tests for the top-level app."""

    def test_version(self) -> None:
        """--version prints the package version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestNewCommandDirectoryErrors:
    """Filesystem failures are reported as errors, not tracebacks."""

    def test_file_at_project_path_exits_1_with_error(self, projects_dir: Path) -> None:
        """A file named like the project prints an Error line and exits 1."""
        (projects_dir / "demo").write_text("x", encoding="utf-8")
        fake = FakeRunner()
        with patch("repokit.cli.new_cmd.CommandRunner", return_value=fake):
            result = runner.invoke(app, _args(projects_dir, "demo"))
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Error:" in result.output
        assert "git init" not in fake.keys

    def test_bad_commit_message_placeholder_exits_1_before_any_step(
        self, projects_dir: Path
    ) -> None:
        """An unknown placeholder in commit_message is rejected at config load."""
        config = projects_dir.parent / "config.yaml"
        config.write_text("commit_message: 'Init {project}'\n", encoding="utf-8")
        fake = FakeRunner()
        with patch("repokit.cli.new_cmd.CommandRunner", return_value=fake):
            result = runner.invoke(
                app,
                ["new", "demo", "--projects-dir", str(projects_dir), "--config", str(config)],
            )
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert fake.calls == []
        assert list(projects_dir.iterdir()) == []
