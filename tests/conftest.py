"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

from pod_aggregate.core.exceptions import ProjectLoadError
from pod_aggregate.target.aggregate import AggregateTarget
from pod_aggregate.target.platform import Platform


# --- Collaborator doubles ---


@dataclass
class FakeTargetDefinition:
    label: str
    platform: Platform = field(default_factory=Platform.ios)
    frameworks: bool = False

    def uses_frameworks(self) -> bool:
        return self.frameworks


@dataclass
class FakeSandbox:
    root: Path

    def target_support_files_dir(self, name: str) -> Path:
        return self.root / "Target Support Files" / name


@dataclass(frozen=True)
class FakeSpec:
    name: str

    def consumer(self, platform: Platform) -> tuple[str, Platform]:
        return (self.name, platform)


@dataclass(eq=False)
class FakePodTarget:
    name: str
    specs: list[FakeSpec] = field(default_factory=list)
    build_configurations: set[str] = field(default_factory=set)
    swift: bool = False

    def include_in_build_config(self, build_configuration: str) -> bool:
        return build_configuration in self.build_configurations

    def uses_swift(self) -> bool:
        return self.swift


@dataclass
class FakeNativeTarget:
    uuid: str
    name: str


@dataclass
class FakeProject:
    objects: dict[str, Any] = field(default_factory=dict)

    def object_by_uuid(self, uuid: str) -> Any | None:
        return self.objects.get(uuid)


@dataclass
class FakeProjectLoader:
    projects: dict[Path, FakeProject] = field(default_factory=dict)
    opened: list[Path] = field(default_factory=list)

    def open(self, path: Path) -> FakeProject:
        self.opened.append(path)
        try:
            return self.projects[path]
        except KeyError:
            raise ProjectLoadError(str(path), "no such project") from None


# --- Fixtures ---


@pytest.fixture
def definition() -> FakeTargetDefinition:
    return FakeTargetDefinition(label="Pods-MyApp")


@pytest.fixture
def sandbox() -> FakeSandbox:
    return FakeSandbox(root=Path("/repo/Pods"))


@pytest.fixture
def target(definition: FakeTargetDefinition, sandbox: FakeSandbox) -> AggregateTarget:
    """Aggregate target with no phase-populated fields."""
    return AggregateTarget(definition, sandbox)


@pytest.fixture
def make_pod_target():
    """Helper to create pod targets.

    Usage:
        make_pod_target("AFNetworking", specs=["AFNetworking"], configs={"Debug"})
    """

    def _make(
        name: str,
        specs: list[str] | None = None,
        configs: set[str] | None = None,
        swift: bool = False,
    ) -> FakePodTarget:
        return FakePodTarget(
            name=name,
            specs=[FakeSpec(s) for s in (specs if specs is not None else [name])],
            build_configurations=set(configs or ()),
            swift=swift,
        )

    return _make


@pytest.fixture
def make_project():
    """Helper to create a user project holding native targets by UUID."""

    def _make(**targets: str) -> FakeProject:
        return FakeProject(
            objects={uuid: FakeNativeTarget(uuid=uuid, name=name) for uuid, name in targets.items()}
        )

    return _make


@pytest.fixture
def project_loader() -> FakeProjectLoader:
    return FakeProjectLoader()
