"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path
from typing import Callable, Dict, Generator, List, Optional, Sequence, Tuple, Union

import pytest

from nodeprobe.runtime import NodeBinaryProvider
from nodeprobe.utils import EnvironmentVars, SpawnResult


class FakePathSearcher:
    """Test double for PATH lookups.

    Maps bare executable names to absolute paths without touching the
    filesystem. Names that aren't mapped are "not found".
    """

    def __init__(self, binaries: Optional[Dict[str, str]] = None):
        self.binaries = dict(binaries or {})
        self.calls: List[str] = []

    def __call__(self, executable: str, env: EnvironmentVars) -> Optional[str]:
        self.calls.append(executable)
        if not env.path_value:
            return None
        return self.binaries.get(executable)


class FakeProcessRunner:
    """Test double for spawning ``<binary> --version``.

    Each binary maps to the stdout it prints, or an exception to raise.
    Binaries without an entry behave as if they don't exist.
    """

    def __init__(self, outputs: Optional[Dict[str, Union[str, Exception]]] = None):
        self.outputs = dict(outputs or {})
        self.calls: List[Tuple[str, List[str]]] = []

    async def __call__(self, command: str, args: Sequence[str] = ()) -> SpawnResult:
        self.calls.append((command, list(args)))
        output = self.outputs.get(command)
        if output is None:
            raise FileNotFoundError(2, "No such file or directory", command)
        if isinstance(output, Exception):
            raise output
        return SpawnResult(stdout=output, stderr="", returncode=0)

    def probe_count(self, command: str) -> int:
        return sum(1 for called, _ in self.calls if called == command)


@pytest.fixture
def env() -> EnvironmentVars:
    """Environment with a non-empty PATH."""
    return EnvironmentVars({"PATH": "/usr/local/bin:/usr/bin"}, case_insensitive=False)


@pytest.fixture
def path_searcher() -> FakePathSearcher:
    return FakePathSearcher()


@pytest.fixture
def process_runner() -> FakeProcessRunner:
    return FakeProcessRunner()


@pytest.fixture
def provider(path_searcher, process_runner) -> NodeBinaryProvider:
    """Provider wired to the fakes, with a fresh cache per test."""
    return NodeBinaryProvider(
        path_searcher=path_searcher,
        process_runner=process_runner,
    )


@pytest.fixture
def fake_path_searcher() -> Callable[..., FakePathSearcher]:
    """Factory for additional path searchers."""
    return FakePathSearcher


@pytest.fixture
def fake_process_runner() -> Callable[..., FakeProcessRunner]:
    """Factory for additional process runners."""
    return FakeProcessRunner


@pytest.fixture
def temp_project_dir() -> Generator[Path, None, None]:
    """Create an empty temporary project directory."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)
