"""Node.js runtime resolution and validation."""

from .errors import (
    NodeBinaryError,
    NodeBinaryErrorKind,
    NodeBinaryNotFound,
    NodeBinaryOutOfDate,
)
from .resolver import NodeBinaryProvider
from .specs import CANONICAL_NODE_NAME, MIN_NODE_MAJOR_VERSION
from .types import NodeBinary

__all__ = [
    "NodeBinaryProvider",
    "NodeBinary",
    "NodeBinaryError",
    "NodeBinaryErrorKind",
    "NodeBinaryNotFound",
    "NodeBinaryOutOfDate",
    "CANONICAL_NODE_NAME",
    "MIN_NODE_MAJOR_VERSION",
]
