"""Tests for the run goal use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from bootable_jar_runner.artifact_resolution.artifact_resolver import ArtifactNotFoundError
from bootable_jar_runner.configuration.runtime_settings import (
    Configuration,
    ProjectContext,
    RunSettings,
)
from bootable_jar_runner.process_launch.launch_command import LaunchCommand
from bootable_jar_runner.process_launch.process_supervisor import ProcessLaunchError
from bootable_jar_runner.run_execution.bootable_jar_run_use_case import (
    RunExecutionError,
    execute_bootable_jar_run,
)
from bootable_jar_runner.run_execution.run_contracts import RunRequest


class _FakeHandle:
    def __init__(self, exit_code: int) -> None:
        self._exit_code = exit_code

    def wait(self) -> int:
        return self._exit_code


class _RecordingLauncher:
    def __init__(self, exit_code: int = 0, error: Exception | None = None) -> None:
        self._exit_code = exit_code
        self._error = error
        self.commands: list[LaunchCommand] = []

    def launch(self, command: LaunchCommand) -> _FakeHandle:
        self.commands.append(command)
        if self._error is not None:
            raise self._error
        return _FakeHandle(self._exit_code)


def _request(build_directory: Path, **run_overrides) -> RunRequest:
    project = ProjectContext(
        group_id="org.example",
        artifact_id="demo",
        version="1.0.0",
        build_directory=build_directory,
    )
    return RunRequest(
        configuration=Configuration(
            path=build_directory / "bootable-jar.yaml",
            project=project,
            run=RunSettings(**run_overrides),
        )
    )


def _write_default_jar(build_directory: Path) -> Path:
    jar_path = build_directory / "demo-1.0.0-bootable.jar"
    jar_path.write_bytes(b"PK")
    return jar_path


def test_skip_returns_without_resolving_or_launching(tmp_path: Path, caplog) -> None:
    launcher = _RecordingLauncher()

    with caplog.at_level(logging.DEBUG, logger="bootable_jar_runner"):
        outcome = execute_bootable_jar_run(_request(tmp_path, skip=True), launcher=launcher)

    assert outcome.skipped is True
    assert launcher.commands == []
    assert "Skipping run of org.example:demo" in caplog.text


def test_run_launches_merged_command_and_returns_exit_code(tmp_path: Path) -> None:
    jar_path = _write_default_jar(tmp_path)
    launcher = _RecordingLauncher(exit_code=0)
    request = _request(
        tmp_path,
        jvm_arguments=("-Xmx512m",),
        jvm_arguments_props="-Dfoo=bar  -Dbaz=qux",
        arguments=("-b=0.0.0.0",),
        arguments_props="--debug",
        java_home=tmp_path / "jdk",
    )

    outcome = execute_bootable_jar_run(request, launcher=launcher)

    assert outcome.skipped is False
    assert outcome.exit_code == 0
    assert len(launcher.commands) == 1
    command = launcher.commands[0]
    assert command.jvm_arguments == ("-Xmx512m", "-Dfoo=bar", "-Dbaz=qux")
    assert command.arguments == ("-b=0.0.0.0", "--debug")
    assert command.artifact_path == jar_path
    assert command.java_executable.startswith(str(tmp_path / "jdk"))


def test_non_zero_exit_code_still_completes_the_run(tmp_path: Path) -> None:
    _write_default_jar(tmp_path)

    outcome = execute_bootable_jar_run(_request(tmp_path), launcher=_RecordingLauncher(1))

    assert outcome.skipped is False
    assert outcome.exit_code == 1


def test_custom_jar_file_name_is_launched(tmp_path: Path) -> None:
    _write_default_jar(tmp_path)
    custom_jar = tmp_path / "custom.jar"
    custom_jar.write_bytes(b"PK")
    launcher = _RecordingLauncher()

    execute_bootable_jar_run(_request(tmp_path, jar_file_name="custom.jar"), launcher=launcher)

    assert launcher.commands[0].artifact_path == custom_jar


def test_missing_jar_fails_before_launch(tmp_path: Path) -> None:
    launcher = _RecordingLauncher()

    with pytest.raises(RunExecutionError, match="Cannot run without a bootable jar") as excinfo:
        execute_bootable_jar_run(_request(tmp_path), launcher=launcher)

    assert isinstance(excinfo.value.__cause__, ArtifactNotFoundError)
    assert launcher.commands == []


def test_launch_failure_is_wrapped_with_cause(tmp_path: Path) -> None:
    _write_default_jar(tmp_path)
    launcher = _RecordingLauncher(error=FileNotFoundError("java"))

    with pytest.raises(RunExecutionError, match="Failed to start") as excinfo:
        execute_bootable_jar_run(_request(tmp_path), launcher=launcher)

    assert isinstance(excinfo.value.__cause__, ProcessLaunchError)
    assert isinstance(excinfo.value.__cause__.__cause__, FileNotFoundError)
