"""Aggregate target.

Clusters the pod targets of a single Podfile target definition. The user's
native targets link against the aggregate instead of each pod target.

Population order during an installation:
    1. construction with the target definition and the sandbox
    2. analyzer: client_root, user project (path + target UUIDs), pod_targets
    3. target installer: xcconfigs
Every read site checks its own preconditions; nothing assumes the order
above has been followed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path, PurePosixPath
from typing import Any

from pod_aggregate.core.config import DEFAULT_CONVENTIONS, SupportFileConventions, UserProject
from pod_aggregate.core.enums import ProductType, SupportFileKind
from pod_aggregate.core.exceptions import (
    ClientRootAlreadySetError,
    ClientRootNotSetError,
    DuplicatePodTargetError,
    DuplicateTargetUUIDError,
    ProjectLoaderNotConfiguredError,
    UserTargetNotFoundError,
)
from pod_aggregate.core.naming import c99ext_identifier, xcconfig_basename
from pod_aggregate.core.paths import relative_path_from, srcroot_path
from pod_aggregate.target.platform import Platform
from pod_aggregate.target.protocol import (
    PodTarget,
    ProjectHandle,
    ProjectLoader,
    Sandbox,
    Specification,
    TargetDefinition,
)

logger = logging.getLogger(__name__)


class AggregateTarget:
    """Target clustering the pod targets of one target definition.

    Args:
        target_definition: Definition the aggregate was created for.
        sandbox: Sandbox the pods are installed into.
        conventions: Naming of generated support files.
        project_loader: Used by :meth:`user_targets` when no project is passed.
    """

    def __init__(
        self,
        target_definition: TargetDefinition,
        sandbox: Sandbox,
        conventions: SupportFileConventions = DEFAULT_CONVENTIONS,
        project_loader: ProjectLoader | None = None,
    ) -> None:
        self._target_definition = target_definition
        self._sandbox = sandbox
        self.conventions = conventions
        self.project_loader = project_loader
        self._client_root: Path | None = None
        self.user_project_path: Path | None = None
        self._user_target_uuids: list[str] = []
        self._pod_targets: list[PodTarget] = []
        self._xcconfigs: dict[str, Any] = {}

    @property
    def target_definition(self) -> TargetDefinition:
        return self._target_definition

    @property
    def sandbox(self) -> Sandbox:
        return self._sandbox

    @property
    def label(self) -> str:
        """Label of the target definition (e.g. ``Pods-MyApp``)."""
        return str(self._target_definition.label)

    @property
    def name(self) -> str:
        return self.label

    @property
    def platform(self) -> Platform:
        return self._target_definition.platform

    @property
    def requires_frameworks(self) -> bool:
        return bool(self._target_definition.uses_frameworks())

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    @property
    def product_module_name(self) -> str:
        """Module name used to import the aggregate from source files."""
        return c99ext_identifier(self.label)

    @property
    def product_type(self) -> ProductType:
        if self.requires_frameworks:
            return ProductType.FRAMEWORK
        return ProductType.STATIC_LIBRARY

    @property
    def product_basename(self) -> str:
        """Product name without extension."""
        if self.requires_frameworks:
            return self.product_module_name
        return f"lib{self.label}"

    @property
    def product_name(self) -> str:
        """File name of the built product."""
        if self.requires_frameworks:
            return f"{self.product_basename}.framework"
        return f"{self.product_basename}.a"

    # ------------------------------------------------------------------
    # Populated by later phases
    # ------------------------------------------------------------------

    @property
    def client_root(self) -> Path | None:
        """Folder relative paths are computed from.

        When integrating this is the folder of the user project, otherwise
        the installation root. Can only be set once.
        """
        return self._client_root

    @client_root.setter
    def client_root(self, value: Path | str) -> None:
        path = Path(value)
        if self._client_root is not None and self._client_root != path:
            raise ClientRootAlreadySetError(self.label, str(self._client_root), str(path))
        logger.debug("Client root of %s set to %s", self.label, path)
        self._client_root = path

    @property
    def user_target_uuids(self) -> list[str]:
        """UUIDs of the user targets integrated with this target.

        Only identifiers are kept: project instances are reloaded between
        phases and stored objects would go stale.
        """
        return list(self._user_target_uuids)

    @user_target_uuids.setter
    def user_target_uuids(self, uuids: Iterable[str]) -> None:
        checked: list[str] = []
        for uuid in uuids:
            if uuid in checked:
                raise DuplicateTargetUUIDError(self.label, uuid)
            checked.append(uuid)
        self._user_target_uuids = checked

    @property
    def user_project(self) -> UserProject | None:
        """Snapshot of the user project fields, or None without a project path."""
        if self.user_project_path is None:
            return None
        return UserProject(path=self.user_project_path, target_uuids=self._user_target_uuids)

    def apply_user_project(self, user_project: UserProject) -> None:
        """Record the project and user targets identified by the analyzer."""
        self.user_project_path = user_project.path
        self.user_target_uuids = user_project.target_uuids

    @property
    def pod_targets(self) -> list[PodTarget]:
        """Pod targets the aggregate depends on.

        Returns a copy; assign the property to change the dependencies.
        """
        return list(self._pod_targets)

    @pod_targets.setter
    def pod_targets(self, pod_targets: Iterable[PodTarget]) -> None:
        checked: list[PodTarget] = []
        for pod_target in pod_targets:
            if any(existing is pod_target for existing in checked):
                raise DuplicatePodTargetError(self.label, pod_target)
            checked.append(pod_target)
        self._pod_targets = checked

    @property
    def xcconfigs(self) -> dict[str, Any]:
        """Build configuration name -> xcconfig generated for it.

        Filled by the target installer and read by the project integrator to
        check for overridden values. Returns a copy; use the setter or
        :meth:`set_xcconfig` to change it.
        """
        return dict(self._xcconfigs)

    @xcconfigs.setter
    def xcconfigs(self, xcconfigs: Mapping[str, Any]) -> None:
        self._xcconfigs = dict(xcconfigs)

    def set_xcconfig(self, build_configuration: str, xcconfig: Any) -> None:
        self._xcconfigs[build_configuration] = xcconfig

    # ------------------------------------------------------------------
    # User targets
    # ------------------------------------------------------------------

    def user_targets(self, project: ProjectHandle | None = None) -> list[Any]:
        """List the user targets integrated with this target.

        Args:
            project: Already loaded user project. When omitted the project at
                ``user_project_path`` is opened with ``project_loader``.

        Returns:
            Native targets in ``user_target_uuids`` order; empty when no user
            project is recorded.

        Raises:
            ProjectLoaderNotConfiguredError: If the project has to be opened
                and no loader is set.
            UserTargetNotFoundError: If a UUID has no object in the project.
        """
        if self.user_project_path is None:
            return []

        if project is None:
            if self.project_loader is None:
                raise ProjectLoaderNotConfiguredError(self.label, str(self.user_project_path))
            logger.debug("Opening user project %s for %s", self.user_project_path, self.label)
            project = self.project_loader.open(self.user_project_path)

        native_targets: list[Any] = []
        for uuid in self._user_target_uuids:
            native_target = project.object_by_uuid(uuid)
            if native_target is None:
                raise UserTargetNotFoundError(uuid, self.label)
            native_targets.append(native_target)

        logger.debug("Resolved %d user target(s) for %s", len(native_targets), self.label)
        return native_targets

    # ------------------------------------------------------------------
    # Pod targets and specifications
    # ------------------------------------------------------------------

    def pod_targets_for_build_configuration(self, build_configuration: str) -> list[PodTarget]:
        """Pod targets linked in *build_configuration*."""
        return [
            pod_target
            for pod_target in self._pod_targets
            if pod_target.include_in_build_config(build_configuration)
        ]

    def specs(self) -> list[Specification]:
        """Specifications of all pod targets. Duplicates are kept."""
        return [spec for pod_target in self._pod_targets for spec in pod_target.specs]

    def specs_by_build_configuration(self) -> dict[str, list[Specification]]:
        """Specifications for every known build configuration."""
        return {
            build_configuration: [
                spec
                for pod_target in self.pod_targets_for_build_configuration(build_configuration)
                for spec in pod_target.specs
            ]
            for build_configuration in self._xcconfigs
        }

    def spec_consumers(self) -> list[Any]:
        return [spec.consumer(self.platform) for spec in self.specs()]

    def uses_swift(self) -> bool:
        return any(pod_target.uses_swift() for pod_target in self._pod_targets)

    # ------------------------------------------------------------------
    # Support files
    # ------------------------------------------------------------------

    @property
    def support_files_dir(self) -> Path:
        return Path(self._sandbox.target_support_files_dir(self.label))

    def support_file_path(self, kind: SupportFileKind) -> Path:
        return self.support_files_dir / self.conventions.basename(self.label, kind)

    @property
    def acknowledgements_basepath(self) -> Path:
        """Acknowledgements file path without extension.

        The generators add the extension matching their file type.
        """
        return self.support_file_path(SupportFileKind.ACKNOWLEDGEMENTS)

    @property
    def copy_resources_script_path(self) -> Path:
        return self.support_file_path(SupportFileKind.COPY_RESOURCES_SCRIPT)

    @property
    def embed_frameworks_script_path(self) -> Path:
        return self.support_file_path(SupportFileKind.EMBED_FRAMEWORKS_SCRIPT)

    def xcconfig_path(self, build_configuration: str | None = None) -> Path:
        """Path of the xcconfig generated for *build_configuration*."""
        return self.support_files_dir / xcconfig_basename(
            self.label, build_configuration, self.conventions.xcconfig_extension
        )

    # ------------------------------------------------------------------
    # Paths relative to the client root
    # ------------------------------------------------------------------

    def relative_to_srcroot(self, path: Path | str) -> PurePosixPath:
        """Express a sandboxed *path* relative to the client root.

        Raises:
            ClientRootNotSetError: If ``client_root`` has not been set.
        """
        return relative_path_from(path, self._require_client_root(f"the path of '{path}'"))

    @property
    def relative_pods_root(self) -> str:
        """Sandbox root as seen from the ``$(SRCROOT)`` of the user project."""
        client_root = self._require_client_root("the relative pods root")
        relative = relative_path_from(self._sandbox.root, client_root)
        return srcroot_path(relative, self.conventions.srcroot_variable)

    def xcconfig_relative_path(self, build_configuration: str) -> str:
        """Path of the xcconfig for *build_configuration* relative to the client root."""
        return str(self.relative_to_srcroot(self.xcconfig_path(build_configuration)))

    @property
    def copy_resources_script_relative_path(self) -> str:
        return srcroot_path(
            self.relative_to_srcroot(self.copy_resources_script_path),
            self.conventions.srcroot_variable,
        )

    @property
    def embed_frameworks_script_relative_path(self) -> str:
        return srcroot_path(
            self.relative_to_srcroot(self.embed_frameworks_script_path),
            self.conventions.srcroot_variable,
        )

    def _require_client_root(self, operation: str) -> Path:
        if self._client_root is None:
            raise ClientRootNotSetError(self.label, operation)
        return self._client_root

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.label} platform={self.platform}>"
