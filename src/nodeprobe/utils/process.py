"""Async subprocess helpers."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence


@dataclass
class SpawnResult:
    """Captured output of a finished process."""

    stdout: str
    stderr: str
    returncode: int


class ProcessExitError(Exception):
    """Raised when a process starts but exits with a non-zero code."""

    def __init__(self, command: List[str], returncode: int, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"{' '.join(command)} exited with code {returncode}"
        if stderr:
            message += f": {stderr.strip()[:200]}"
        super().__init__(message)


async def spawn_async(
    command: str,
    args: Sequence[str] = (),
    env: Optional[Dict[str, str]] = None,
    cwd: Optional[str] = None,
) -> SpawnResult:
    """Run a process to completion and capture its output.

    No timeout is applied; callers that need one should wrap this in
    ``asyncio.wait_for``. If the call is cancelled the child is killed.

    Raises:
        OSError: If the process could not be started (missing binary,
            not executable, permission denied)
        ProcessExitError: If the process exited with a non-zero code
    """
    argv = [command, *args]

    process = await asyncio.create_subprocess_exec(
        *argv,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        env=env,
        cwd=cwd,
    )

    try:
        stdout, stderr = await process.communicate()
    except BaseException:
        # Cancelled (e.g. by asyncio.wait_for) while the child still runs
        if process.returncode is None:
            process.kill()
            await process.wait()
        raise

    result = SpawnResult(
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
        returncode=process.returncode if process.returncode is not None else -1,
    )

    if result.returncode != 0:
        raise ProcessExitError(argv, result.returncode, result.stderr)

    return result
