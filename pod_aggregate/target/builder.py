"""Aggregate target builder.

Provides a fluent builder that collects what the installation phases learn
about an aggregate target and applies it in population order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pod_aggregate.core.config import DEFAULT_CONVENTIONS, SupportFileConventions, UserProject
from pod_aggregate.target.aggregate import AggregateTarget
from pod_aggregate.target.protocol import PodTarget, ProjectLoader, Sandbox, TargetDefinition


def aggregate_target(
    target_definition: TargetDefinition,
    sandbox: Sandbox,
) -> AggregateTargetBuilder:
    """Entry point for the aggregate target builder.

    Args:
        target_definition: Definition the aggregate target clusters pods for.
        sandbox: Sandbox the pods are installed into.

    Returns:
        A builder for chaining population steps.
    """
    return AggregateTargetBuilder(target_definition, sandbox)


class AggregateTargetBuilder:
    """Fluent builder for aggregate targets."""

    def __init__(self, target_definition: TargetDefinition, sandbox: Sandbox) -> None:
        self._target_definition = target_definition
        self._sandbox = sandbox
        self._conventions: SupportFileConventions = DEFAULT_CONVENTIONS
        self._project_loader: ProjectLoader | None = None
        self._client_root: Path | None = None
        self._user_project: UserProject | None = None
        self._pod_targets: list[PodTarget] = []
        self._xcconfigs: dict[str, Any] = {}

    def conventions(self, conventions: SupportFileConventions) -> AggregateTargetBuilder:
        """Override the support file naming conventions."""
        self._conventions = conventions
        return self

    def project_loader(self, loader: ProjectLoader) -> AggregateTargetBuilder:
        """Set the loader used to open the user project."""
        self._project_loader = loader
        return self

    def client_root(self, path: Path | str) -> AggregateTargetBuilder:
        """Set the folder relative paths are computed from."""
        self._client_root = Path(path)
        return self

    def user_project(
        self,
        path: Path | str,
        target_uuids: list[str] | None = None,
    ) -> AggregateTargetBuilder:
        """Record the user project and the UUIDs of the targets to integrate."""
        self._user_project = UserProject(path=Path(path), target_uuids=target_uuids or [])
        return self

    def pod_target(self, pod_target: PodTarget) -> AggregateTargetBuilder:
        """Add a single pod target dependency."""
        self._pod_targets.append(pod_target)
        return self

    def pod_targets(self, pod_targets: list[PodTarget]) -> AggregateTargetBuilder:
        """Add several pod target dependencies."""
        self._pod_targets.extend(pod_targets)
        return self

    def xcconfig(self, build_configuration: str, xcconfig: Any = None) -> AggregateTargetBuilder:
        """Declare a build configuration and the xcconfig generated for it."""
        self._xcconfigs[build_configuration] = xcconfig
        return self

    def build(self) -> AggregateTarget:
        """Create the aggregate target and apply the collected fields."""
        target = AggregateTarget(
            self._target_definition,
            self._sandbox,
            conventions=self._conventions,
            project_loader=self._project_loader,
        )

        # Analyzer phase
        if self._client_root is not None:
            target.client_root = self._client_root
        if self._user_project is not None:
            target.apply_user_project(self._user_project)
        target.pod_targets = self._pod_targets

        # Target installer phase
        target.xcconfigs = self._xcconfigs
        return target
