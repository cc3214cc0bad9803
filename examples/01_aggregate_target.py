"""
Example 01: Aggregate Target

This example demonstrates populating an aggregate target the way an
installation does and reading the per-configuration and path views used by
the xcconfig generator and the project integrator.
"""

from dataclasses import dataclass, field
from pathlib import Path

from pod_aggregate import Platform, aggregate_target


@dataclass
class TargetDefinition:
    """Podfile target definition"""
    label: str
    platform: Platform

    def uses_frameworks(self) -> bool:
        return False


@dataclass
class Sandbox:
    """Pods directory"""
    root: Path

    def target_support_files_dir(self, name: str) -> Path:
        return self.root / "Target Support Files" / name


@dataclass(frozen=True)
class Spec:
    name: str

    def consumer(self, platform: Platform) -> str:
        return f"{self.name} ({platform})"


@dataclass(eq=False)
class PodTarget:
    name: str
    configurations: set[str]
    specs: list[Spec] = field(default_factory=list)

    def include_in_build_config(self, build_configuration: str) -> bool:
        return build_configuration in self.configurations

    def uses_swift(self) -> bool:
        return False


def main():
    definition = TargetDefinition(label="Pods-MyApp", platform=Platform.ios("9.0"))
    sandbox = Sandbox(root=Path("/work/MyApp/Pods"))

    target = (
        aggregate_target(definition, sandbox)
        .client_root("/work/MyApp/App")
        .pod_target(PodTarget("AFNetworking", {"Debug", "Release"}, [Spec("AFNetworking")]))
        .pod_target(PodTarget("Reveal-SDK", {"Debug"}, [Spec("Reveal-SDK")]))
        .xcconfig("Debug")
        .xcconfig("Release")
        .build()
    )

    print("=== Aggregate Target ===\n")
    print(f"Label:          {target.label}")
    print(f"Module name:    {target.product_module_name}")
    print(f"Product:        {target.product_name}")
    print(f"Uses Swift:     {target.uses_swift()}\n")

    print("Specs by build configuration:")
    for config, specs in target.specs_by_build_configuration().items():
        print(f"  {config}: {[spec.name for spec in specs]}")
    print()

    print(f"Consumers: {target.spec_consumers()}\n")

    print("Paths relative to $(SRCROOT):")
    print(f"  PODS_ROOT:         {target.relative_pods_root}")
    print(f"  Debug xcconfig:    {target.xcconfig_relative_path('Debug')}")
    print(f"  Resources script:  {target.copy_resources_script_relative_path}")
    print(f"  Frameworks script: {target.embed_frameworks_script_relative_path}")


if __name__ == "__main__":
    main()
