"""Launch option entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LaunchOptions:
    """Merged JVM options and server arguments ready for command assembly."""

    jvm_arguments: tuple[str, ...] = ()
    arguments: tuple[str, ...] = ()
