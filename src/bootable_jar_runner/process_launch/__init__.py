"""Process launch exports."""

from .launch_command import LaunchCommand, build_launch_command, resolve_java_executable
from .process_outcomes import ProcessOutcome
from .process_supervisor import (
    ProcessHandle,
    ProcessLauncher,
    ProcessLaunchError,
    SubprocessLauncher,
    launch_and_wait,
    run_launch_command,
)

__all__ = [
    "LaunchCommand",
    "ProcessOutcome",
    "ProcessHandle",
    "ProcessLauncher",
    "ProcessLaunchError",
    "SubprocessLauncher",
    "build_launch_command",
    "launch_and_wait",
    "resolve_java_executable",
    "run_launch_command",
]
