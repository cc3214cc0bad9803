"""pod-aggregate exception hierarchy.

Every error raised by the package derives from PodAggregateError. Errors
raised by project loaders are never wrapped: they reach the caller as-is.
"""

from __future__ import annotations


class PodAggregateError(Exception):
    """Base exception for all pod-aggregate errors."""


# --- Preconditions ---


class PreconditionError(PodAggregateError):
    """Base for operations called before the target is populated for them."""


class ClientRootNotSetError(PreconditionError):
    """Raised when a client-relative path is requested without a client root."""

    def __init__(self, target_label: str, operation: str) -> None:
        self.target_label = target_label
        self.operation = operation
        super().__init__(
            f"Cannot compute {operation} for `{target_label}`: client root is not set"
        )


class ClientRootAlreadySetError(PreconditionError):
    """Raised when the client root is reassigned to a different path."""

    def __init__(self, target_label: str, current: str, attempted: str) -> None:
        self.target_label = target_label
        self.current = current
        self.attempted = attempted
        super().__init__(
            f"Client root of `{target_label}` is already set to '{current}' "
            f"(attempted '{attempted}')"
        )


class ProjectLoaderNotConfiguredError(PreconditionError):
    """Raised when a user project must be opened but no loader is available."""

    def __init__(self, target_label: str, project_path: str) -> None:
        self.target_label = target_label
        self.project_path = project_path
        super().__init__(
            f"No project loader configured for `{target_label}` to open '{project_path}'"
        )


# --- Integrity ---


class IntegrityError(PodAggregateError):
    """Base for inconsistencies between recorded and actual state."""


class UserTargetNotFoundError(IntegrityError):
    """Raised when a recorded user target UUID is missing from the project."""

    def __init__(self, uuid: str, target_label: str) -> None:
        self.uuid = uuid
        self.target_label = target_label
        super().__init__(
            f"[Bug] Unable to find the target with the `{uuid}` UUID "
            f"for the `{target_label}` integration library"
        )


class DuplicatePodTargetError(IntegrityError):
    """Raised when the same pod target is added to an aggregate twice."""

    def __init__(self, target_label: str, pod_target: object) -> None:
        self.target_label = target_label
        self.pod_target = pod_target
        super().__init__(f"Pod target {pod_target!r} is already part of `{target_label}`")


class DuplicateTargetUUIDError(IntegrityError):
    """Raised when a user target UUID is recorded more than once."""

    def __init__(self, target_label: str, uuid: str) -> None:
        self.target_label = target_label
        self.uuid = uuid
        super().__init__(f"User target UUID `{uuid}` is listed twice for `{target_label}`")


# --- Paths ---


class PathResolutionError(PodAggregateError):
    """Raised when a relative path cannot be computed between two paths."""

    def __init__(self, path: str, base: str, detail: str) -> None:
        self.path = path
        self.base = base
        super().__init__(f"Cannot express '{path}' relative to '{base}': {detail}")


# --- Project loading ---


class ProjectLoadError(PodAggregateError):
    """Raised by project loaders on missing or malformed project files."""

    def __init__(self, project_path: str, detail: str) -> None:
        self.project_path = project_path
        super().__init__(f"Failed to open project '{project_path}': {detail}")
