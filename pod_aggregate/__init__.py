"""pod-aggregate - aggregate targets clustering pod targets for a user target."""

from __future__ import annotations

from pod_aggregate.core.config import SupportFileConventions, UserProject
from pod_aggregate.core.enums import PlatformName, ProductType, SupportFileKind
from pod_aggregate.core.exceptions import (
    ClientRootAlreadySetError,
    ClientRootNotSetError,
    DuplicatePodTargetError,
    DuplicateTargetUUIDError,
    IntegrityError,
    PathResolutionError,
    PodAggregateError,
    PreconditionError,
    ProjectLoaderNotConfiguredError,
    ProjectLoadError,
    UserTargetNotFoundError,
)
from pod_aggregate.core.naming import c99ext_identifier
from pod_aggregate.core.paths import relative_path_from
from pod_aggregate.target.aggregate import AggregateTarget
from pod_aggregate.target.builder import AggregateTargetBuilder, aggregate_target
from pod_aggregate.target.platform import Platform

__all__ = [
    # Target
    "AggregateTarget",
    "AggregateTargetBuilder",
    "aggregate_target",
    "Platform",
    # Configuration
    "SupportFileConventions",
    "UserProject",
    # Helpers
    "c99ext_identifier",
    "relative_path_from",
    # Enums
    "PlatformName",
    "ProductType",
    "SupportFileKind",
    # Exceptions
    "PodAggregateError",
    "PreconditionError",
    "ClientRootNotSetError",
    "ClientRootAlreadySetError",
    "ProjectLoaderNotConfiguredError",
    "IntegrityError",
    "UserTargetNotFoundError",
    "DuplicatePodTargetError",
    "DuplicateTargetUUIDError",
    "PathResolutionError",
    "ProjectLoadError",
]
