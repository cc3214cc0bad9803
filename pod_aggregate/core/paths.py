"""Relative path computation against the client root.

The computation is lexical: no file system access, ``..`` segments are
produced whenever the base is not an ancestor of the path.

    relative_path_from("/a/b/Pods", "/a/b/App")     -> "../Pods"
    srcroot_path("Pods", "${SRCROOT}")              -> "${SRCROOT}/Pods"
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath, PurePosixPath

from pod_aggregate.core.exceptions import PathResolutionError


def relative_path_from(path: Path | str, base: Path | str) -> PurePosixPath:
    """Express *path* relative to *base*.

    Both paths must be absolute, or both relative (to the same directory).
    The working directory is never consulted.

    Raises:
        PathResolutionError: If one path is absolute and the other is not,
            if they are on different drives, or if a relative *base* climbs
            above *path* with ``..`` segments.
    """
    path = Path(path)
    base = Path(base)
    if path.is_absolute() != base.is_absolute():
        raise PathResolutionError(
            str(path), str(base), "an absolute and a relative path cannot be mixed"
        )
    if path.anchor != base.anchor:
        raise PathResolutionError(str(path), str(base), "paths are on different drives")

    path_parts = _normalized_parts(path)
    base_parts = _normalized_parts(base)

    common = 0
    while (
        common < len(path_parts)
        and common < len(base_parts)
        and path_parts[common] == base_parts[common]
    ):
        common += 1

    remaining_base = base_parts[common:]
    if ".." in remaining_base:
        raise PathResolutionError(
            str(path), str(base), "the base directory climbs above the path with '..'"
        )

    parts = [".."] * len(remaining_base) + path_parts[common:]
    if not parts:
        return PurePosixPath(".")
    return PurePosixPath(*parts)


def _normalized_parts(path: Path) -> list[str]:
    """Lexically normalized segments of *path* without its anchor."""
    normalized = PurePath(os.path.normpath(path))
    parts = list(normalized.parts)
    if normalized.anchor:
        parts = parts[1:]
    return [part for part in parts if part != "."]


def srcroot_path(relative: PurePosixPath | str, srcroot_variable: str = "${SRCROOT}") -> str:
    """Prefix *relative* with the build system's source root variable."""
    return f"{srcroot_variable}/{PurePosixPath(relative).as_posix()}"
