"""Errors raised while resolving a Node binary."""

from __future__ import annotations

from enum import Enum

from .specs import MIN_NODE_MAJOR_VERSION


class NodeBinaryErrorKind(Enum):
    """Why a Node binary could not be used."""
    NOT_FOUND = "not_found"
    OUT_OF_DATE = "out_of_date"


class NodeBinaryError(Exception):
    """Base class for Node binary resolution failures.

    Callers branch on ``kind`` rather than on the concrete subclass.
    Neither kind is retried here; fixing the setup is up to the user.
    """

    kind: NodeBinaryErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NodeBinaryNotFound(NodeBinaryError):
    """The executable could not be found on PATH, or could not be run."""

    kind = NodeBinaryErrorKind.NOT_FOUND

    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(self._format_error_message(executable))

    def _format_error_message(self, executable: str) -> str:
        lines = [
            f'Can\'t find Node.js binary "{executable}": path does not exist '
            "or could not be run.",
            "",
            "Make sure Node.js is installed and on your PATH, or set "
            "[runtime] executable in .nodeprobe.toml.",
        ]
        return "\n".join(lines)


class NodeBinaryOutOfDate(NodeBinaryError):
    """The binary runs, but is not a Node version we can debug."""

    kind = NodeBinaryErrorKind.OUT_OF_DATE

    def __init__(self, version_text: str, path: str):
        self.version_text = version_text
        self.path = path
        super().__init__(self._format_error_message(version_text, path))

    def _format_error_message(self, version_text: str, path: str) -> str:
        lines = [
            f'The Node version in "{path}" is outdated (version {version_text}), '
            f"we require at least Node {MIN_NODE_MAJOR_VERSION}.x.",
            "",
            "Upgrade Node.js, or point [runtime] executable in .nodeprobe.toml "
            "at a newer installation.",
        ]
        return "\n".join(lines)
