"""Boilerplate files for a new project.

Writes the README, .gitignore, and an empty package skeleton
(src/, tests/, config/, lambda_functions/) into a project directory.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

console = Console()

# Template files to generate: (template_name, output_path)
# Templates containing {project_name} are rendered with str.format.
_FILE_MAP: list[tuple[str, str]] = [
    ("README.md.tmpl", "README.md"),
    ("main.py.tmpl", "src/main.py"),
]

# Copied verbatim
_STATIC_MAP: list[tuple[str, str]] = [
    ("gitignore.tmpl", ".gitignore"),
]

# Empty placeholder files
_EMPTY_FILES: list[str] = [
    "src/__init__.py",
    "tests/__init__.py",
    "tests/test_main.py",
    "config/__init__.py",
    "config/settings.py",
]

_SKELETON_DIRS: list[str] = ["src", "tests", "lambda_functions", "config"]


def _get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return Path(__file__).parent / "templates"


def _ensure_ignored(gitignore_path: Path, entry: str) -> None:
    """Append entry to .gitignore unless it is already listed."""
    content = gitignore_path.read_text(encoding="utf-8")
    if entry in content.splitlines():
        return
    if content and not content.endswith("\n"):
        content += "\n"
    content += entry + "\n"
    gitignore_path.write_text(content, encoding="utf-8")


def scaffold_project(directory: Path, project_name: str, venv_dir: str = "venv") -> list[str]:
    """Write the starter files for project_name into directory.

    Existing files with the same names are overwritten; the directory
    itself must already exist.

    Args:
        directory: Project root.
        project_name: Name substituted into README.md and src/main.py.
        venv_dir: Virtual environment directory name, kept out of git.

    Returns:
        List of created file paths (relative to directory).
    """
    templates_dir = _get_templates_dir()

    for subdir in _SKELETON_DIRS:
        (directory / subdir).mkdir(parents=True, exist_ok=True)

    created: list[str] = []
    for template_name, output_path in _FILE_MAP:
        template = (templates_dir / template_name).read_text(encoding="utf-8")
        target = directory / output_path
        target.write_text(template.format(project_name=project_name), encoding="utf-8")
        created.append(output_path)

    for template_name, output_path in _STATIC_MAP:
        target = directory / output_path
        target.write_text(
            (templates_dir / template_name).read_text(encoding="utf-8"), encoding="utf-8"
        )
        created.append(output_path)

    _ensure_ignored(directory / ".gitignore", f"{venv_dir.rstrip('/')}/")

    for output_path in _EMPTY_FILES:
        (directory / output_path).touch()
        created.append(output_path)

    for path in created:
        console.print(f"  [green]✓[/green] {path}")

    return created
