"""Process launch outcome entities."""

from __future__ import annotations

from dataclasses import dataclass

from .launch_command import LaunchCommand


@dataclass(frozen=True)
class ProcessOutcome:
    """Exit status of a bootable jar process that ran to completion.

    The exit code is informational: any value counts as a completed run.
    """

    command: LaunchCommand
    exit_code: int
