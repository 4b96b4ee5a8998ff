"""repokit data models - re-exports all public model classes."""

from repokit.models.config import RepokitConfig, load_config
from repokit.models.project import (
    ConflictChoice,
    ProjectTarget,
    ResolutionState,
    validate_project_name,
)

__all__ = [
    "ConflictChoice",
    "ProjectTarget",
    "RepokitConfig",
    "ResolutionState",
    "load_config",
    "validate_project_name",
]
