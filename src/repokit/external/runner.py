"""Subprocess wrapper used for every git, gh, and pip invocation.

Only the exit status and captured output of a command are consumed.
Commands never raise on failure; callers inspect CommandResult.ok.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127


@dataclass
class CommandResult:
    """Outcome of a single external command."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner:
    """Run external commands and capture their output."""

    def run(
        self,
        args: Sequence[str],
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """Run a command to completion.

        Args:
            args: Program and arguments.
            cwd: Working directory, or None for the current one.
            env: Full environment for the child, or None to inherit.

        Returns:
            CommandResult with the exit status and captured text output.
            A missing executable yields return code 127.
        """
        argv = [str(a) for a in args]
        logger.debug("run: %s (cwd=%s)", " ".join(argv), cwd)
        try:
            completed = subprocess.run(
                argv,
                cwd=str(cwd) if cwd is not None else None,
                env=dict(env) if env is not None else None,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            logger.debug("command not found: %s", argv[0])
            return CommandResult(
                args=argv,
                returncode=COMMAND_NOT_FOUND,
                stderr=f"{argv[0]}: command not found",
            )

        if completed.returncode != 0:
            logger.debug(
                "command exited %d: %s", completed.returncode, completed.stderr.strip()
            )
        return CommandResult(
            args=argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
