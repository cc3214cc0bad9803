"""Target platform value object."""

from __future__ import annotations

from dataclasses import dataclass

from pod_aggregate.core.enums import PlatformName


@dataclass(frozen=True)
class Platform:
    """A platform name with an optional minimum deployment target."""

    name: PlatformName
    deployment_target: str | None = None

    @classmethod
    def ios(cls, deployment_target: str | None = None) -> Platform:
        return cls(PlatformName.IOS, deployment_target)

    @classmethod
    def osx(cls, deployment_target: str | None = None) -> Platform:
        return cls(PlatformName.OSX, deployment_target)

    @property
    def string_name(self) -> str:
        """Human readable platform name (``iOS``, ``OS X``, ...)."""
        return _STRING_NAMES[self.name]

    def __str__(self) -> str:
        if self.deployment_target is None:
            return self.string_name
        return f"{self.string_name} {self.deployment_target}"


_STRING_NAMES: dict[PlatformName, str] = {
    PlatformName.IOS: "iOS",
    PlatformName.OSX: "OS X",
    PlatformName.TVOS: "tvOS",
    PlatformName.WATCHOS: "watchOS",
}
