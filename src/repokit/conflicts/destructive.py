"""Irreversible operations offered at the conflict menus.

Each one writes an audit record on the ``repokit.audit`` logger before
it acts. Local deletion is guarded by a y/N confirmation in
LocalDirectorySite; remote deletion is not unless the config opts in.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from repokit.errors import ProjectDirectoryError, RemoteDeleteError
from repokit.external.github import GitHubCLI

audit_logger = logging.getLogger("repokit.audit")


def destroy_local_directory(path: Path) -> None:
    """Recursively delete a project directory.

    Raises:
        ProjectDirectoryError: If the tree cannot be removed.
    """
    audit_logger.warning("Deleting local directory %s", path)
    try:
        shutil.rmtree(path)
    except OSError as exc:
        raise ProjectDirectoryError(
            f"Failed to delete directory {path}: {exc.strerror or exc}"
        ) from exc


def delete_remote_repository(github: GitHubCLI, name: str) -> None:
    """Delete a GitHub repository.

    Raises:
        RemoteDeleteError: If gh reports a failure.
    """
    audit_logger.warning("Deleting GitHub repository %s", name)
    result = github.delete_repo(name)
    if not result.ok:
        detail = result.stderr.strip()
        raise RemoteDeleteError(
            f"Failed to delete GitHub repository '{name}'"
            + (f": {detail}" if detail else ".")
        )
