"""Run execution domain exports."""

from .bootable_jar_run_use_case import RunExecutionError, execute_bootable_jar_run
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_bootable_jar_run",
]
