"""Declarative description of a debuggable Node.js binary.

This is DATA, not code. Version gating and binary naming live here so the
resolver only deals with control flow.
"""

import os
import re
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class VersionCheck:
    """Configuration for checking runtime version."""
    args: List[str] = field(default_factory=lambda: ["--version"])
    parse: str = r"^v([0-9]+)\."  # Matches the "12" in "v12.34.56"


CANONICAL_NODE_NAME = "node"

# node, node64, node.exe, node64.exe. Case-sensitive on purpose.
NODE_BINARY_PATTERN = re.compile(r"^node(64)?(\.exe)?$")

# Oldest major version with the inspector features the debugger relies on
MIN_NODE_MAJOR_VERSION = 8

# Node 12 started accepting require paths containing spaces
SPACES_IN_REQUIRE_PATH_MIN_MAJOR = 12

NODE_VERSION_CHECK = VersionCheck()


def looks_like_node_binary(location: str) -> bool:
    """Check whether a path names the Node binary itself.

    Anything else (nvm shims, ``npx``-style wrappers, shell scripts) is
    assumed to delegate to a real Node binary somewhere on the PATH.
    """
    return NODE_BINARY_PATTERN.match(os.path.basename(location)) is not None


def parse_major_version(version_text: str) -> Optional[int]:
    """Extract the major version from ``node --version`` output.

    The match is anchored at the start of the untrimmed text, so leading
    whitespace or a missing minor component (``"v8"``) yields None.
    Pre-release suffixes are ignored: ``"v18.0.0-nightly"`` gives 18.
    """
    match = re.match(NODE_VERSION_CHECK.parse, version_text)
    if not match:
        return None
    return int(match.group(1))
