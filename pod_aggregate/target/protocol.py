"""Collaborator protocols.

The aggregate target never owns its collaborators. Target definitions,
sandboxes, pod targets, specifications and user projects are supplied by
the surrounding installer and only need to satisfy these protocols.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pod_aggregate.target.platform import Platform


@runtime_checkable
class TargetDefinition(Protocol):
    """Podfile target definition the aggregate target was created for."""

    @property
    def label(self) -> str:
        """Human readable, unique label of the definition (e.g. ``Pods-MyApp``)."""
        ...

    @property
    def platform(self) -> Platform:
        """Platform the definition targets."""
        ...

    def uses_frameworks(self) -> bool:
        """Whether dependencies are integrated as frameworks."""
        ...


@runtime_checkable
class Sandbox(Protocol):
    """Directory where pods and support files are installed."""

    @property
    def root(self) -> Path:
        """Absolute root of the sandbox (usually ``<project>/Pods``)."""
        ...

    def target_support_files_dir(self, name: str) -> Path:
        """Directory holding the generated support files of target *name*."""
        ...


@runtime_checkable
class Specification(Protocol):
    """Pod specification."""

    def consumer(self, platform: Platform) -> Any:
        """Return the specification resolved for *platform*."""
        ...


@runtime_checkable
class PodTarget(Protocol):
    """A single resolved, independently built dependency."""

    @property
    def specs(self) -> list[Specification]:
        """Specifications built by this pod target."""
        ...

    def include_in_build_config(self, build_configuration: str) -> bool:
        """Whether the pod target is linked for *build_configuration*."""
        ...

    def uses_swift(self) -> bool:
        """Whether any of the pod target's sources are Swift."""
        ...


@runtime_checkable
class ProjectHandle(Protocol):
    """Loaded native project."""

    def object_by_uuid(self, uuid: str) -> Any | None:
        """Return the project object with *uuid*, or None if there is none."""
        ...


@runtime_checkable
class ProjectLoader(Protocol):
    """Opens native projects from disk."""

    def open(self, path: Path) -> ProjectHandle:
        """Load the project at *path*.

        Raises:
            ProjectLoadError: If the project is missing or malformed.
        """
        ...
