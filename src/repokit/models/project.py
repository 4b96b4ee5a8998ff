"""Per-run project state shared by every initializer step."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from repokit.errors import InvalidNameError

PROJECT_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


def validate_project_name(name: str) -> str:
    """Return name unchanged, or raise InvalidNameError if it has disallowed characters."""
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        raise InvalidNameError(name)
    return name


@dataclass
class ProjectTarget:
    """The project being created.

    Mutable so a rename chosen at either conflict menu is seen by every
    later step. The path is derived on access, never cached.
    """

    name: str
    projects_dir: Path

    @property
    def path(self) -> Path:
        return self.projects_dir / self.name

    def rename(self, new_name: str) -> None:
        self.name = new_name


class ConflictChoice(str, Enum):
    """Options offered at a conflict menu."""

    DESTROY = "1"
    RENAME = "2"
    ABORT = "3"

    @classmethod
    def parse(cls, raw: str) -> ConflictChoice | None:
        """Map raw operator input to a choice; None for anything invalid."""
        try:
            return cls(raw.strip())
        except ValueError:
            return None


class ResolutionState(str, Enum):
    """States of a single conflict check."""

    CHECKING = "checking"
    CLEAR = "clear"
    CONFLICT = "conflict"
    RESOLVED = "resolved"
    ABORTED = "aborted"
