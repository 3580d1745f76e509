"""Child process start and supervision."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol

from .launch_command import LaunchCommand, build_launch_command
from .process_outcomes import ProcessOutcome

logger = logging.getLogger(__name__)


class ProcessLaunchError(Exception):
    """Raised when the bootable jar process cannot be started or awaited."""


class ProcessHandle(Protocol):  # pylint: disable=too-few-public-methods
    """Waitable handle of a started process."""

    def wait(self) -> int: ...


class ProcessLauncher(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for launchers starting one process per command."""

    def launch(self, command: LaunchCommand) -> ProcessHandle: ...


class SubprocessLauncher:  # pylint: disable=too-few-public-methods
    """Real launcher using subprocess; the child inherits the standard streams."""

    def __init__(
        self,
        *,
        working_directory: Path | None = None,
        environment: Mapping[str, str] | None = None,
    ) -> None:
        self._working_directory = working_directory
        self._environment = dict(environment) if environment is not None else None

    def launch(self, command: LaunchCommand) -> ProcessHandle:
        # pylint: disable-next=consider-using-with
        return subprocess.Popen(
            list(command.argv),
            cwd=self._working_directory,
            env=self._environment,
        )


def launch_and_wait(
    artifact_path: Path,
    jvm_arguments: Sequence[str],
    arguments: Sequence[str],
    *,
    launcher: ProcessLauncher | None = None,
    java_home: Path | None = None,
) -> ProcessOutcome:
    """Start the bootable jar and block until it terminates.

    Raises:
      ProcessLaunchError: If the process cannot be started or waiting on it fails.
    """
    command = build_launch_command(artifact_path, jvm_arguments, arguments, java_home=java_home)
    return run_launch_command(command, launcher=launcher)


def run_launch_command(
    command: LaunchCommand, *, launcher: ProcessLauncher | None = None
) -> ProcessOutcome:
    """Start exactly one process for `command` and wait for its exit code."""
    process_launcher = launcher or SubprocessLauncher()
    logger.debug("Launching bootable jar: %s", command.render())
    try:
        handle = process_launcher.launch(command)
    except (OSError, ValueError) as exc:
        raise ProcessLaunchError(
            f"Failed to start bootable jar process ({exc}): {command.render()}"
        ) from exc
    try:
        exit_code = handle.wait()
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise ProcessLaunchError(f"Failed while waiting for bootable jar process: {exc}") from exc
    logger.info("Bootable jar process exited with code %s", exit_code)
    return ProcessOutcome(command=command, exit_code=exit_code)
