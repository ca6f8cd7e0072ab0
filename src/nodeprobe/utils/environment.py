"""Environment variable container used for PATH lookups and child processes."""

from __future__ import annotations

import os
import sys
from typing import Dict, Iterator, Mapping, Optional, Union

EnvLike = Union["EnvironmentVars", Mapping[str, Optional[str]]]


class EnvironmentVars:
    """Immutable set of environment variables.

    On Windows variable names are case-insensitive (``Path`` and ``PATH`` are
    the same variable), so lookups and updates match keys case-insensitively
    there. The original spelling of a key is preserved.

    Every mutating operation returns a new instance.
    """

    platform = sys.platform

    def __init__(
        self,
        vars: Optional[Mapping[str, Optional[str]]] = None,
        case_insensitive: Optional[bool] = None,
    ) -> None:
        if case_insensitive is None:
            case_insensitive = self.platform == "win32"
        self._case_insensitive = case_insensitive
        self._vars: Dict[str, str] = {}

        for name, value in (vars or {}).items():
            if value is None:
                continue
            self._vars[self._key_for(name)] = str(value)

    @classmethod
    def from_process(cls) -> "EnvironmentVars":
        """Snapshot the environment of the current process."""
        return cls(dict(os.environ))

    @property
    def value(self) -> Dict[str, str]:
        """Plain dict copy, suitable for passing to a subprocess."""
        return dict(self._vars)

    @property
    def path_value(self) -> Optional[str]:
        """The PATH-equivalent entry used for executable searches."""
        return self.lookup("PATH")

    def lookup(self, name: str) -> Optional[str]:
        """Get a variable's value, or None if it isn't set."""
        return self._vars.get(self._key_for(name))

    def update(self, name: str, value: Optional[str]) -> "EnvironmentVars":
        """Return a copy with ``name`` set to ``value``. ``None`` unsets it."""
        return self.merge({name: value})

    def merge(self, *others: EnvLike) -> "EnvironmentVars":
        """Return a copy with each of ``others`` applied in order.

        Later values win. A ``None`` value removes the variable.
        """
        merged = dict(self._vars)
        result = EnvironmentVars(merged, case_insensitive=self._case_insensitive)

        for other in others:
            items = other.value if isinstance(other, EnvironmentVars) else other
            for name, value in items.items():
                key = result._key_for(name)
                if value is None:
                    result._vars.pop(key, None)
                else:
                    result._vars[key] = str(value)

        return result

    def defaults(self, defaults: EnvLike) -> "EnvironmentVars":
        """Return a copy where variables from ``defaults`` fill in missing ones."""
        items = defaults.value if isinstance(defaults, EnvironmentVars) else defaults
        missing = {
            name: value for name, value in items.items() if self.lookup(name) is None
        }
        return self.merge(missing)

    def add_to_path(self, location: str, prepend: bool = False) -> "EnvironmentVars":
        """Return a copy with ``location`` added to the search path."""
        current = self.path_value
        if not current:
            return self.update("PATH", location)

        if prepend:
            new_path = f"{location}{os.pathsep}{current}"
        else:
            new_path = f"{current}{os.pathsep}{location}"

        return self.update("PATH", new_path)

    def _key_for(self, name: str) -> str:
        """Find the stored spelling of ``name``, or ``name`` itself if unset."""
        if name in self._vars or not self._case_insensitive:
            return name

        folded = name.casefold()
        for existing in self._vars:
            if existing.casefold() == folded:
                return existing

        return name

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"<EnvironmentVars {len(self._vars)} vars>"

