"""Configuration file parser for nodeprobe."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import dotenv_values

from ..utils.environment import EnvironmentVars

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python 3.10

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".nodeprobe.toml"


class ConfigError(Exception):
    """Raised when the configuration file contains invalid values."""


@dataclass
class RuntimeConfig:
    """Which Node runtime to resolve."""

    executable: str = "node"
    version: Optional[int] = None  # Explicit major version, skips probing
    env_file: Optional[str] = None


@dataclass
class NodeProbeConfig:
    """Complete nodeprobe configuration."""

    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    env: Dict[str, Optional[str]] = field(default_factory=dict)

    # Project root for resolving paths
    project_root: Path = field(default_factory=Path.cwd)

    def resolve_path(self, path_template: str) -> str:
        """Resolve template variables in paths.

        Supports:
            ${PROJECT_ROOT} - absolute path to project root
        """
        return path_template.replace("${PROJECT_ROOT}", str(self.project_root))

    @property
    def executable(self) -> str:
        return self.resolve_path(self.runtime.executable)

    def build_env(self, base: EnvironmentVars) -> EnvironmentVars:
        """Layer the env file, then the [env] table, over ``base``."""
        env = base

        if self.runtime.env_file:
            env_file = Path(self.resolve_path(self.runtime.env_file))
            if not env_file.is_absolute():
                env_file = self.project_root / env_file
            if not env_file.is_file():
                raise ConfigError(f"Env file not found: {env_file}")
            # A bare KEY line parses as None; it must not unset the variable
            file_vars = {
                name: value
                for name, value in dotenv_values(env_file).items()
                if value is not None
            }
            env = env.merge(file_vars)

        if self.env:
            env = env.merge(self.env)

        return env


def find_config_file(project_path: Path) -> Optional[Path]:
    """Find .nodeprobe.toml in project root.

    Args:
        project_path: Root path of the project

    Returns:
        Path to .nodeprobe.toml if found, None otherwise
    """
    config_file = project_path / CONFIG_FILE_NAME
    if config_file.exists():
        return config_file
    return None


def load_config(project_path: Path) -> NodeProbeConfig:
    """Load configuration from .nodeprobe.toml or use defaults.

    A file that is not valid TOML is ignored with a warning. A file that
    parses but holds values of the wrong type raises ConfigError.

    Args:
        project_path: Root path of the project

    Returns:
        NodeProbeConfig with loaded or default configuration
    """
    project_path = Path(project_path)
    config = NodeProbeConfig(project_root=project_path)

    config_file = find_config_file(project_path)
    if not config_file:
        return config

    try:
        with open(config_file, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        logger.warning(f"Ignoring malformed {config_file}: {e}")
        return config

    if "runtime" in data:
        _parse_runtime(config.runtime, data["runtime"])

    if "env" in data:
        config.env = _parse_env(data["env"])

    return config


def _parse_runtime(runtime: RuntimeConfig, runtime_data: Any) -> None:
    if not isinstance(runtime_data, dict):
        raise ConfigError("[runtime] must be a table")

    executable = runtime_data.get("executable", runtime.executable)
    if not isinstance(executable, str) or not executable:
        raise ConfigError("runtime.executable must be a non-empty string")
    runtime.executable = executable

    version = runtime_data.get("version")
    if version is not None:
        # bool is an int subclass in Python
        if isinstance(version, bool) or not isinstance(version, int) or version < 0:
            raise ConfigError("runtime.version must be a non-negative integer")
    runtime.version = version

    env_file = runtime_data.get("env_file")
    if env_file is not None and not isinstance(env_file, str):
        raise ConfigError("runtime.env_file must be a string")
    runtime.env_file = env_file


def _parse_env(env_data: Any) -> Dict[str, Optional[str]]:
    if not isinstance(env_data, dict):
        raise ConfigError("[env] must be a table")

    env: Dict[str, Optional[str]] = {}
    for name, value in env_data.items():
        if isinstance(value, (dict, list)):
            raise ConfigError(f"env.{name} must be a scalar value")
        if isinstance(value, bool):
            value = "true" if value else "false"
        env[name] = str(value)

    return env
