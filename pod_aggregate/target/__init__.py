"""Target layer - aggregate target and its collaborator protocols."""

from __future__ import annotations

from pod_aggregate.target.aggregate import AggregateTarget
from pod_aggregate.target.builder import AggregateTargetBuilder, aggregate_target
from pod_aggregate.target.platform import Platform
from pod_aggregate.target.protocol import (
    PodTarget,
    ProjectHandle,
    ProjectLoader,
    Sandbox,
    Specification,
    TargetDefinition,
)

__all__ = [
    "AggregateTarget",
    "AggregateTargetBuilder",
    "aggregate_target",
    "Platform",
    "TargetDefinition",
    "Sandbox",
    "PodTarget",
    "Specification",
    "ProjectHandle",
    "ProjectLoader",
]
