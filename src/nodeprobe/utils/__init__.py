"""Utility modules (environment, path search, process spawning)."""

from .environment import EnvironmentVars
from .path import find_in_path, is_absolute_executable
from .process import ProcessExitError, SpawnResult, spawn_async

__all__ = [
    "EnvironmentVars",
    "find_in_path",
    "is_absolute_executable",
    "ProcessExitError",
    "SpawnResult",
    "spawn_async",
]
