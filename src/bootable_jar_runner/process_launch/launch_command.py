"""Java command line assembly for a bootable jar."""

from __future__ import annotations

import os
import shlex
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

JAVA_HOME_ENV = "JAVA_HOME"


@dataclass(frozen=True)
class LaunchCommand:
    """Fully assembled argument vector for one bootable jar process."""

    java_executable: str
    jvm_arguments: tuple[str, ...]
    artifact_path: Path
    arguments: tuple[str, ...]

    @property
    def argv(self) -> tuple[str, ...]:
        return (
            self.java_executable,
            *self.jvm_arguments,
            "-jar",
            str(self.artifact_path),
            *self.arguments,
        )

    def render(self) -> str:
        return shlex.join(self.argv)


def resolve_java_executable(
    java_home: Path | None = None, environ: Mapping[str, str] | None = None
) -> str:
    """Return the java binary of `java_home`, of `$JAVA_HOME`, or plain `java` from PATH."""
    environment = os.environ if environ is None else environ
    home = java_home or _java_home_from_environment(environment)
    if home is None:
        return "java"
    return str(_java_binary_path(home))


def build_launch_command(
    artifact_path: Path,
    jvm_arguments: Sequence[str],
    arguments: Sequence[str],
    *,
    java_home: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> LaunchCommand:
    """Build the `java [jvm options] -jar <artifact> [arguments]` command."""
    return LaunchCommand(
        java_executable=resolve_java_executable(java_home, environ),
        jvm_arguments=tuple(jvm_arguments),
        artifact_path=artifact_path,
        arguments=tuple(arguments),
    )


def _java_home_from_environment(environ: Mapping[str, str]) -> Path | None:
    value = environ.get(JAVA_HOME_ENV, "").strip()
    return Path(value) if value else None


def _java_binary_path(java_home: Path) -> Path:
    if sys.platform.startswith("win"):
        return java_home / "bin" / "java.exe"
    return java_home / "bin" / "java"
