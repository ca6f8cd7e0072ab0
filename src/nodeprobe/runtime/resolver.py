"""Resolves a path to Node.js and validates it's a debuggable version."""

import logging
from typing import Awaitable, Callable, Dict, Optional, Sequence

from ..config.parser import NodeProbeConfig
from ..utils.environment import EnvironmentVars
from ..utils.path import find_in_path, is_absolute_executable
from ..utils.process import ProcessExitError, SpawnResult, spawn_async
from .errors import (
    NodeBinaryError,
    NodeBinaryErrorKind,
    NodeBinaryNotFound,
    NodeBinaryOutOfDate,
)
from .specs import (
    CANONICAL_NODE_NAME,
    MIN_NODE_MAJOR_VERSION,
    NODE_VERSION_CHECK,
    looks_like_node_binary,
    parse_major_version,
)
from .types import NodeBinary

logger = logging.getLogger(__name__)

PathSearcher = Callable[[str, EnvironmentVars], Optional[str]]
ProcessRunner = Callable[[str, Sequence[str]], Awaitable[SpawnResult]]


class NodeBinaryProvider:
    """Resolves and validates Node.js binaries.

    Each provider owns its cache of known-good binaries. Only binaries that
    passed version validation are cached; a binary reported as outdated is
    probed again next time, since the user may upgrade Node in place.

    Concurrent resolutions of the same path are not deduplicated: each may
    probe the binary and store an equivalent entry. No timeout is applied to
    the version probe.
    """

    def __init__(
        self,
        path_searcher: PathSearcher = find_in_path,
        process_runner: ProcessRunner = spawn_async,
    ):
        """Initialize provider.

        Args:
            path_searcher: Resolves an executable name against an environment's PATH
            process_runner: Spawns a binary and captures its output
        """
        self._find_in_path = path_searcher
        self._spawn = process_runner
        self.known_good_mappings: Dict[str, NodeBinary] = {}

    async def resolve_and_validate(
        self,
        env: EnvironmentVars,
        executable: str = CANONICAL_NODE_NAME,
        explicit_version: Optional[int] = None,
    ) -> NodeBinary:
        """Validate the executable and return the Node binary to run.

        Args:
            env: Environment whose PATH is searched
            executable: Name or absolute path of the executable to run
            explicit_version: Trusted major version; skips all validation

        Returns:
            NodeBinary with the located path and its major version

        Raises:
            NodeBinaryNotFound: If the executable can't be found or run
            NodeBinaryOutOfDate: If Node is older than we can debug
        """
        location = self._locate(env, executable)

        if explicit_version is not None:
            return NodeBinary(location, explicit_version)

        if looks_like_node_binary(location):
            return await self._validate_candidate(location)

        # The executable may be a shell script or version manager shim that
        # boots Node by itself. Take the version from Node on the same PATH.
        logger.debug(f"{location} is not a Node binary, looking up {CANONICAL_NODE_NAME}")
        try:
            real_binary = await self._validate_candidate(
                self._locate(env, CANONICAL_NODE_NAME)
            )
        except NodeBinaryError as e:
            # An outdated Node is fatal even behind a shim. If Node isn't
            # found, still try the shim since the package manager exists.
            if e.kind is NodeBinaryErrorKind.OUT_OF_DATE:
                raise
            logger.warning(
                f"Could not verify the Node.js version behind {location}, "
                "running it anyway"
            )
            return NodeBinary(location, None)

        return NodeBinary(location, real_binary.major_version)

    async def resolve_configured(
        self,
        env: EnvironmentVars,
        config: NodeProbeConfig,
    ) -> NodeBinary:
        """Resolve the runtime described by a loaded config on top of ``env``."""
        return await self.resolve_and_validate(
            config.build_env(env),
            config.executable,
            config.runtime.version,
        )

    async def get_version_text(self, binary: str) -> str:
        """Run ``binary --version`` and return its raw stdout.

        Raises:
            NodeBinaryNotFound: If the binary can't be spawned or exits non-zero
        """
        try:
            result = await self._spawn(binary, NODE_VERSION_CHECK.args)
        except ProcessExitError as e:
            logger.debug(f"{binary} exited with code {e.returncode} when probing version")
            raise NodeBinaryNotFound(binary) from e
        except OSError as e:
            logger.debug(f"Could not spawn {binary}: {e}")
            raise NodeBinaryNotFound(binary) from e

        return result.stdout

    def _locate(self, env: EnvironmentVars, executable: str) -> str:
        if is_absolute_executable(executable):
            return executable

        location = self._find_in_path(executable, env)
        if not location:
            raise NodeBinaryNotFound(executable)

        logger.debug(f"Found {executable} at {location}")
        return location

    async def _validate_candidate(self, location: str) -> NodeBinary:
        """Probe and version-gate a single binary. Never falls back."""
        known_good = self.known_good_mappings.get(location)
        if known_good:
            logger.debug(f"Using known-good {location}")
            return known_good

        version_text = await self.get_version_text(location)
        logger.debug(f"{location} --version: {version_text.strip()!r}")

        major_version = parse_major_version(version_text)
        if major_version is None or major_version < MIN_NODE_MAJOR_VERSION:
            raise NodeBinaryOutOfDate(version_text.strip(), location)

        entry = NodeBinary(location, major_version)
        self.known_good_mappings[location] = entry
        return entry
