"""Executable lookup against an explicit environment's PATH."""

from __future__ import annotations

import os
import shutil
from typing import Optional

from .environment import EnvironmentVars


def is_absolute_executable(executable: str) -> bool:
    """Check whether ``executable`` is already an absolute path."""
    return bool(executable) and os.path.isabs(executable)


def find_in_path(executable: str, env: EnvironmentVars) -> Optional[str]:
    """Find an executable on the PATH of ``env``.

    Only the PATH carried by ``env`` is searched, never the PATH of the
    current process. Platform executable extensions (``.exe``, ``.cmd``
    on Windows) are tried the way ``shutil.which`` tries them.

    Args:
        executable: Bare executable name (e.g. "node")
        env: Environment whose PATH is searched

    Returns:
        Absolute path to the first match, or None if not found
    """
    if not executable:
        return None

    search_path = env.path_value
    if not search_path:
        return None

    found = shutil.which(executable, path=search_path)
    if found is None:
        return None

    return os.path.abspath(found)
