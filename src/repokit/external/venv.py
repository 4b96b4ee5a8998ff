"""Per-project virtual environment management.

A child process cannot change its parent's shell, so "activation" here
means building the environment that ``source venv/bin/activate`` would
produce and handing it to every command run inside the ``activated()``
block. Leaving the block is the deactivation.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path

from repokit.external.runner import CommandResult, CommandRunner

logger = logging.getLogger(__name__)


class VirtualEnv:
    """A virtual environment rooted at ``path``."""

    def __init__(self, runner: CommandRunner, path: Path, python: str = "python3") -> None:
        self.runner = runner
        self.path = path
        self.python = python
        self._env: dict[str, str] | None = None

    @property
    def bin_dir(self) -> Path:
        return self.path / ("Scripts" if os.name == "nt" else "bin")

    @property
    def interpreter(self) -> Path:
        return self.bin_dir / ("python.exe" if os.name == "nt" else "python")

    @property
    def is_active(self) -> bool:
        return self._env is not None

    def create(self) -> CommandResult:
        return self.runner.run([self.python, "-m", "venv", str(self.path)])

    def activation_env(self, base: Mapping[str, str] | None = None) -> dict[str, str]:
        """Return ``base`` (default: os.environ) with this venv activated."""
        env = dict(os.environ if base is None else base)
        env["VIRTUAL_ENV"] = str(self.path)
        env["PATH"] = os.pathsep.join(
            part for part in (str(self.bin_dir), env.get("PATH", "")) if part
        )
        env.pop("PYTHONHOME", None)
        return env

    @contextmanager
    def activated(self) -> Iterator[VirtualEnv]:
        self._env = self.activation_env()
        logger.debug("activated virtual environment %s", self.path)
        try:
            yield self
        finally:
            self._env = None
            logger.debug("deactivated virtual environment %s", self.path)

    def _pip(self, *args: str) -> CommandResult:
        return self.runner.run(
            [str(self.interpreter), "-m", "pip", *args], env=self._env
        )

    def upgrade_pip(self) -> CommandResult:
        return self._pip("install", "--upgrade", "pip")

    def install(self, packages: list[str]) -> CommandResult:
        return self._pip("install", *packages)

    def freeze(self) -> CommandResult:
        return self._pip("freeze")
