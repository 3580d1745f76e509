"""Run goal use-case service."""

from __future__ import annotations

import logging

from bootable_jar_runner.artifact_resolution import (
    RUN_PURPOSE,
    ArtifactNotFoundError,
    resolve_artifact,
)
from bootable_jar_runner.launch_options import prepare_options
from bootable_jar_runner.process_launch import (
    ProcessLauncher,
    ProcessLaunchError,
    launch_and_wait,
)

from .run_contracts import RunOutcome, RunRequest

logger = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when the run goal cannot be completed."""


def execute_bootable_jar_run(
    request: RunRequest, *, launcher: ProcessLauncher | None = None
) -> RunOutcome:
    """Run the bootable jar of the configured project and wait for it to exit.

    Any exit code of the child process counts as a completed run.
    """
    project = request.configuration.project
    settings = request.configuration.run
    if settings.skip:
        logger.debug("Skipping run of %s", project.coordinates)
        return RunOutcome.skipped_run()

    options = prepare_options(
        settings.jvm_arguments,
        settings.jvm_arguments_props,
        settings.arguments,
        settings.arguments_props,
    )
    try:
        artifact = resolve_artifact(settings.jar_file_name, project, RUN_PURPOSE)
        process = launch_and_wait(
            artifact.path,
            options.jvm_arguments,
            options.arguments,
            launcher=launcher,
            java_home=settings.java_home,
        )
    except (ArtifactNotFoundError, ProcessLaunchError) as exc:
        raise RunExecutionError(str(exc)) from exc
    return RunOutcome.completed(process)
