"""Artifact resolution exports."""

from .artifact_location import RUN_PURPOSE, ArtifactLocation
from .artifact_resolver import ArtifactNotFoundError, default_jar_file_name, resolve_artifact

__all__ = [
    "RUN_PURPOSE",
    "ArtifactLocation",
    "ArtifactNotFoundError",
    "default_jar_file_name",
    "resolve_artifact",
]
