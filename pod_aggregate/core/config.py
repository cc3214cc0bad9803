"""Configuration models.

SupportFileConventions holds the naming rules for generated support files.
UserProject is the analyzer's answer to "which project and which targets
does this aggregate integrate".
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from pod_aggregate.core.enums import SupportFileKind


class SupportFileConventions(BaseModel):
    """Naming conventions for the files generated next to an aggregate target."""

    model_config = ConfigDict(frozen=True)

    srcroot_variable: str = "${SRCROOT}"
    acknowledgements_suffix: str = "-acknowledgements"
    copy_resources_script_suffix: str = "-resources.sh"
    embed_frameworks_script_suffix: str = "-frameworks.sh"
    xcconfig_extension: str = ".xcconfig"

    def suffix_for(self, kind: SupportFileKind) -> str:
        """Return the file name suffix used for *kind*."""
        if kind is SupportFileKind.ACKNOWLEDGEMENTS:
            return self.acknowledgements_suffix
        if kind is SupportFileKind.COPY_RESOURCES_SCRIPT:
            return self.copy_resources_script_suffix
        return self.embed_frameworks_script_suffix

    def basename(self, label: str, kind: SupportFileKind) -> str:
        """Return ``<label><suffix>`` for the support file *kind*."""
        return f"{label}{self.suffix_for(kind)}"


class UserProject(BaseModel):
    """User project and native target UUIDs identified by the analyzer."""

    path: Path
    target_uuids: list[str] = []


DEFAULT_CONVENTIONS = SupportFileConventions()
