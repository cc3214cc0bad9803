"""Unit tests for user target resolution."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from pod_aggregate.core.exceptions import (
    ProjectLoaderNotConfiguredError,
    ProjectLoadError,
    UserTargetNotFoundError,
)
from pod_aggregate.target.aggregate import AggregateTarget

PROJECT_PATH = Path("/repo/App.xcodeproj")


class TestUserTargets:
    def test_no_project_path_returns_empty(self, target: AggregateTarget) -> None:
        target.user_target_uuids = ["A1"]
        assert target.user_targets() == []

    def test_no_project_path_does_not_touch_loader(
        self, target: AggregateTarget, project_loader
    ) -> None:
        target.project_loader = project_loader
        assert target.user_targets() == []
        assert project_loader.opened == []

    def test_uses_given_project(self, target: AggregateTarget, make_project) -> None:
        target.user_project_path = PROJECT_PATH
        target.user_target_uuids = ["A1"]
        project = make_project(A1="App")

        [native_target] = target.user_targets(project)
        assert native_target.name == "App"

    def test_opens_project_with_loader(
        self, target: AggregateTarget, project_loader, make_project
    ) -> None:
        project_loader.projects[PROJECT_PATH] = make_project(A1="App", B2="AppTests")
        target.project_loader = project_loader
        target.user_project_path = PROJECT_PATH
        target.user_target_uuids = ["A1", "B2"]

        assert [t.name for t in target.user_targets()] == ["App", "AppTests"]
        assert project_loader.opened == [PROJECT_PATH]

    def test_given_project_skips_loader(
        self, target: AggregateTarget, project_loader, make_project
    ) -> None:
        target.project_loader = project_loader
        target.user_project_path = PROJECT_PATH
        target.user_target_uuids = ["A1"]

        target.user_targets(make_project(A1="App"))
        assert project_loader.opened == []

    def test_order_follows_uuids(self, target: AggregateTarget, make_project) -> None:
        target.user_project_path = PROJECT_PATH
        target.user_target_uuids = ["C3", "A1", "B2"]
        project = make_project(A1="App", B2="AppTests", C3="Widget")

        assert [t.name for t in target.user_targets(project)] == ["Widget", "App", "AppTests"]

    def test_empty_uuids_returns_empty(self, target: AggregateTarget, make_project) -> None:
        target.user_project_path = PROJECT_PATH
        assert target.user_targets(make_project(A1="App")) == []

    def test_missing_uuid_raises(self, target: AggregateTarget, make_project) -> None:
        target.user_project_path = PROJECT_PATH
        target.user_target_uuids = ["A1", "DEAD"]

        with pytest.raises(UserTargetNotFoundError) as exc_info:
            target.user_targets(make_project(A1="App"))

        assert exc_info.value.uuid == "DEAD"
        assert exc_info.value.target_label == "Pods-MyApp"
        assert "`DEAD` UUID" in str(exc_info.value)
        assert "`Pods-MyApp`" in str(exc_info.value)

    def test_missing_uuid_aborts_before_later_lookups(self, target: AggregateTarget) -> None:
        project = MagicMock()
        project.object_by_uuid.side_effect = [None, "never reached"]
        target.user_project_path = PROJECT_PATH
        target.user_target_uuids = ["A1", "B2"]

        with pytest.raises(UserTargetNotFoundError):
            target.user_targets(project)
        project.object_by_uuid.assert_called_once_with("A1")

    def test_no_loader_raises(self, target: AggregateTarget) -> None:
        target.user_project_path = PROJECT_PATH
        with pytest.raises(ProjectLoaderNotConfiguredError, match="App.xcodeproj"):
            target.user_targets()

    def test_load_error_propagates(self, target: AggregateTarget, project_loader) -> None:
        target.project_loader = project_loader
        target.user_project_path = PROJECT_PATH
        with pytest.raises(ProjectLoadError, match="no such project"):
            target.user_targets()

    def test_foreign_load_error_not_wrapped(self, target: AggregateTarget) -> None:
        loader = MagicMock()
        loader.open.side_effect = OSError("permission denied")
        target.project_loader = loader
        target.user_project_path = PROJECT_PATH

        with pytest.raises(OSError, match="permission denied"):
            target.user_targets()

    def test_resolves_again_on_every_call(
        self, target: AggregateTarget, project_loader, make_project
    ) -> None:
        project_loader.projects[PROJECT_PATH] = make_project(A1="App")
        target.project_loader = project_loader
        target.user_project_path = PROJECT_PATH
        target.user_target_uuids = ["A1"]

        first = target.user_targets()
        project_loader.projects[PROJECT_PATH] = make_project(A1="Renamed")
        second = target.user_targets()

        assert first[0].name == "App"
        assert second[0].name == "Renamed"
        assert project_loader.opened == [PROJECT_PATH, PROJECT_PATH]
