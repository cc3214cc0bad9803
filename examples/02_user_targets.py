"""
Example 02: Resolving User Targets

This example demonstrates how an aggregate target resolves the user's native
targets from recorded UUIDs, and how a project edited between phases is
reported.
"""

from dataclasses import dataclass
from pathlib import Path

from pod_aggregate import Platform, UserTargetNotFoundError, aggregate_target


@dataclass
class TargetDefinition:
    label: str
    platform: Platform

    def uses_frameworks(self) -> bool:
        return True


@dataclass
class Sandbox:
    root: Path

    def target_support_files_dir(self, name: str) -> Path:
        return self.root / "Target Support Files" / name


class InMemoryProject:
    """Stand-in for a parsed project: objects keyed by UUID"""

    def __init__(self, objects):
        self.objects = objects

    def object_by_uuid(self, uuid):
        return self.objects.get(uuid)


def main():
    project = InMemoryProject({"A1B2C3": "MyApp", "D4E5F6": "MyAppTests"})

    target = (
        aggregate_target(
            TargetDefinition(label="Pods-MyApp", platform=Platform.ios("9.0")),
            Sandbox(root=Path("/work/MyApp/Pods")),
        )
        .user_project("/work/MyApp/MyApp.xcodeproj", ["A1B2C3", "D4E5F6"])
        .build()
    )

    print("=== User Targets ===\n")
    print(f"Resolved: {target.user_targets(project)}\n")

    # Someone deleted the test target between analysis and integration
    del project.objects["D4E5F6"]
    try:
        target.user_targets(project)
    except UserTargetNotFoundError as e:
        print(f"Error: {e}")
        print(f"  uuid={e.uuid} target={e.target_label}")


if __name__ == "__main__":
    main()
