"""Artifact resolution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

RUN_PURPOSE = "run"


@dataclass(frozen=True)
class ArtifactLocation:
    """Resolved bootable jar on disk and the project it belongs to."""

    path: Path
    coordinates: str
    version: str
    purpose: str = RUN_PURPOSE
