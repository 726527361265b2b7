"""Core configuration layer of the collector plugin.

This package contains everything the collector needs to learn its operating
parameters from the shadowsocks host process:
- Typed environment variable access
- SIP003 plugin options decoding
- The process-wide resolved configuration
- Exception handling

The traffic accounting itself lives outside this package and calls into it
once at startup.
"""

from .config import ConfigStore, ResolvedConfig, config_store, get_config
from .exceptions import CollectorError, ConfigError, MissingVariableError

__all__ = [
    "CollectorError",
    "ConfigError",
    "ConfigStore",
    "MissingVariableError",
    "ResolvedConfig",
    "config_store",
    "get_config",
]
