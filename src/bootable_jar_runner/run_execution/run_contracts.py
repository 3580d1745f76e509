"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass

from bootable_jar_runner.configuration.runtime_settings import Configuration
from bootable_jar_runner.process_launch.launch_command import LaunchCommand
from bootable_jar_runner.process_launch.process_outcomes import ProcessOutcome


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one run."""

    configuration: Configuration


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one run: skipped, or a process that ran to completion."""

    skipped: bool
    process: ProcessOutcome | None = None

    @property
    def command(self) -> LaunchCommand | None:
        return self.process.command if self.process else None

    @property
    def exit_code(self) -> int | None:
        return self.process.exit_code if self.process else None

    @staticmethod
    def skipped_run() -> RunOutcome:
        return RunOutcome(skipped=True)

    @staticmethod
    def completed(process: ProcessOutcome) -> RunOutcome:
        return RunOutcome(skipped=False, process=process)
