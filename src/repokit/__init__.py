"""repokit - catalog Python files and bootstrap new GitHub-backed projects."""

__version__ = "0.1.0"
