"""User configuration model for repokit.

Captures config.yaml fields with sensible defaults for the project
initializer: where projects live, how the GitHub repository is created,
and which packages seed the virtual environment.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from repokit.errors import ConfigError

CONFIG_ENV_VAR = "REPOKIT_CONFIG"

DEFAULT_DEPENDENCIES: list[str] = [
    "boto3",
    "awscli",
    "pytest",
    "mypy",
    "black",
    "pylint",
    "python-dotenv",
]


def default_config_path() -> Path:
    """Return ~/.config/repokit/config.yaml."""
    return Path.home() / ".config" / "repokit" / "config.yaml"


class RepokitConfig(BaseModel):
    """Settings loaded from config.yaml."""

    model_config = {"extra": "forbid"}

    projects_dir: Path = Field(default_factory=lambda: Path.home() / "Projects")
    github_username: str | None = None
    visibility: Literal["public", "private", "internal"] = "public"
    default_branch: str = "main"
    venv_dir: str = "venv"
    python: str = "python3"
    upgrade_pip: bool = True
    dependencies: list[str] = Field(default_factory=lambda: list(DEFAULT_DEPENDENCIES))
    commit_message: str = "Initial project setup for {name}"
    confirm_remote_delete: bool = False

    @field_validator("projects_dir")
    @classmethod
    def _expand_user(cls, value: Path) -> Path:
        return value.expanduser()

    @field_validator("commit_message")
    @classmethod
    def _check_placeholders(cls, value: str) -> str:
        try:
            value.format(name="x")
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(
                f"commit_message may only use the {{name}} placeholder ({exc!r})"
            ) from exc
        return value


def resolve_config_path(explicit: Path | None = None) -> Path:
    """Pick the config file: explicit path, then $REPOKIT_CONFIG, then the default."""
    if explicit is not None:
        return explicit
    env_value = os.environ.get(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value)
    return default_config_path()


def load_config(path: Path | None = None) -> RepokitConfig:
    """Load RepokitConfig from YAML. Returns defaults if the file is missing or empty.

    Args:
        path: Explicit config file. If None, uses resolve_config_path().

    Returns:
        Validated RepokitConfig instance.

    Raises:
        ConfigError: If the file is not valid YAML or fails validation.
    """
    config_path = resolve_config_path(path)
    if not config_path.exists():
        return RepokitConfig()

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{config_path}: invalid YAML ({exc})") from exc

    if raw is None:
        return RepokitConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path}: expected a mapping at the top level")

    try:
        return RepokitConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"{config_path}: {exc}") from exc
