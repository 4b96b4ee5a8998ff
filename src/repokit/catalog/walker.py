"""Depth-limited listing of files by suffix.

Mirrors ``find . -maxdepth 2 -type f -name "*.py"``: files directly in
the root are at depth 1, symlinks are neither followed nor listed.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

DEFAULT_OUTPUT = "python_catalog_list.txt"
DEFAULT_SUFFIX = ".py"
DEFAULT_MAX_DEPTH = 2


def iter_catalog(
    root: Path,
    suffix: str = DEFAULT_SUFFIX,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Iterator[Path]:
    """Yield matching regular files under root, in sorted order.

    Args:
        root: Directory to walk. OS errors (missing root, permissions)
            propagate to the caller.
        suffix: Filename suffix to match, e.g. ".py".
        max_depth: Deepest directory level to list files from.
    """

    def _walk(directory: Path, depth: int) -> Iterator[Path]:
        for entry in sorted(directory.iterdir()):
            if entry.is_symlink():
                continue
            if entry.is_dir():
                if depth < max_depth:
                    yield from _walk(entry, depth + 1)
            elif entry.is_file() and entry.name.endswith(suffix):
                yield entry

    if max_depth < 1:
        return
    yield from _walk(root, 1)


def write_catalog(
    root: Path,
    output: Path,
    suffix: str = DEFAULT_SUFFIX,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[str]:
    """Overwrite output with one root-relative POSIX path per line.

    Returns:
        The lines written, without newlines.
    """
    lines = [
        path.relative_to(root).as_posix()
        for path in iter_catalog(root, suffix=suffix, max_depth=max_depth)
    ]
    output.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return lines
