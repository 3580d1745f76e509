"""Bootable jar lookup in the project build directory."""

from __future__ import annotations

import logging
from pathlib import Path

from bootable_jar_runner.configuration.runtime_settings import ProjectContext

from .artifact_location import RUN_PURPOSE, ArtifactLocation

BOOTABLE_SUFFIX = "bootable"
JAR_EXTENSION = "jar"

logger = logging.getLogger(__name__)


class ArtifactNotFoundError(Exception):
    """Raised when no bootable jar exists at the computed location."""

    def __init__(self, path: Path, purpose: str) -> None:
        super().__init__(
            f"Cannot {purpose} without a bootable jar; no file found at {path}. "
            f"Package the bootable jar before invoking {purpose}."
        )
        self.path = path
        self.purpose = purpose


def default_jar_file_name(project: ProjectContext) -> str:
    """Return the file name the packaging step gives a bootable jar by default."""
    return f"{project.effective_final_name}-{BOOTABLE_SUFFIX}.{JAR_EXTENSION}"


def resolve_artifact(
    jar_file_name: str | None,
    project: ProjectContext,
    purpose: str = RUN_PURPOSE,
) -> ArtifactLocation:
    """Locate the bootable jar of `project`.

    Args:
      jar_file_name: Optional file name overriding the default, relative to the
        project build directory.
      project: Coordinates and build directory of the owning project.
      purpose: Goal requesting the jar, used in error messages.

    Returns:
      The location of an existing jar file.

    Raises:
      ArtifactNotFoundError: If no file exists at the computed path.
    """
    file_name = jar_file_name or default_jar_file_name(project)
    candidate = project.build_directory / file_name
    logger.debug("Looking up bootable jar for %s at %s", project.coordinates, candidate)
    if not candidate.is_file():
        raise ArtifactNotFoundError(candidate, purpose)
    return ArtifactLocation(
        path=candidate,
        coordinates=project.coordinates,
        version=project.version,
        purpose=purpose,
    )
