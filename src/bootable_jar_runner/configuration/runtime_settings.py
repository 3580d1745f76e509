"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ProjectContext:
    """Coordinates and build output location of the project owning the bootable jar."""

    group_id: str
    artifact_id: str
    version: str
    build_directory: Path
    final_name: str | None = None

    @property
    def effective_final_name(self) -> str:
        return self.final_name or f"{self.artifact_id}-{self.version}"

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


@dataclass(frozen=True)
class RunSettings:  # pylint: disable=too-many-instance-attributes
    """Settings of the run goal."""

    skip: bool = False
    jvm_arguments: tuple[str, ...] = ()
    arguments: tuple[str, ...] = ()
    jvm_arguments_props: str | None = None
    arguments_props: str | None = None
    jar_file_name: str | None = None
    java_home: Path | None = None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    project: ProjectContext
    run: RunSettings
