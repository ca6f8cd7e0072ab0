"""Locate a Node.js binary and check that it can be debugged."""

from .config import load_config
from .runtime import (
    NodeBinary,
    NodeBinaryError,
    NodeBinaryErrorKind,
    NodeBinaryNotFound,
    NodeBinaryOutOfDate,
    NodeBinaryProvider,
)
from .utils import EnvironmentVars

__version__ = "0.1.0"

__all__ = [
    "EnvironmentVars",
    "NodeBinary",
    "NodeBinaryError",
    "NodeBinaryErrorKind",
    "NodeBinaryNotFound",
    "NodeBinaryOutOfDate",
    "NodeBinaryProvider",
    "load_config",
]
