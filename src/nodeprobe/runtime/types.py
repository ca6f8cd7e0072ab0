"""Data types for Node binary resolution."""

from dataclasses import dataclass
from typing import Optional

from .specs import SPACES_IN_REQUIRE_PATH_MIN_MAJOR


@dataclass(frozen=True)
class NodeBinary:
    """A resolved Node.js executable.

    Attributes:
        path: Absolute path to the executable to run
        major_version: Major Node version, or None when unknown (e.g. a shim
            was accepted without a verifiable Node behind it). Unknown is
            treated as capable.
    """

    path: str
    major_version: Optional[int] = None

    @property
    def can_use_spaces_in_require_path(self) -> bool:
        if self.major_version is None:
            return True
        return self.major_version >= SPACES_IN_REQUIRE_PATH_MIN_MAJOR

    def __repr__(self) -> str:
        version_str = f" v{self.major_version}" if self.major_version is not None else ""
        return f"<NodeBinary{version_str} @ {self.path}>"
