"""Configuration management for nodeprobe."""

from .parser import (
    CONFIG_FILE_NAME,
    ConfigError,
    NodeProbeConfig,
    RuntimeConfig,
    find_config_file,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "NodeProbeConfig",
    "RuntimeConfig",
    "find_config_file",
    "load_config",
]
