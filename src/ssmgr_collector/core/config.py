"""Process-wide configuration of the collector plugin.

This module resolves the collector configuration from the environment set up
by the shadowsocks host (SIP003):
- ``SS_REMOTE_HOST`` / ``SS_REMOTE_PORT``: remote management host
- ``SS_LOCAL_HOST`` / ``SS_LOCAL_PORT``: local bind address of the proxy
- ``SS_PLUGIN_OPTIONS``: optional ``key=value;...`` extension options

The configuration is resolved lazily on first access and cached for the rest
of the process. Initialization is guarded by a lock, so concurrent first
callers still trigger exactly one resolution. Once cached, the configuration
is returned without locking since it never changes.

Example:
    from ssmgr_collector.core.config import get_config

    config = get_config()
    sock.connect(config.remote_address)
"""

import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Final

from loguru import logger

from .env import EnvironmentAccessor
from .exceptions import MissingVariableError
from .plugin_options import parse_plugin_options

REMOTE_HOST_VAR: Final = "SS_REMOTE_HOST"
REMOTE_PORT_VAR: Final = "SS_REMOTE_PORT"
LOCAL_HOST_VAR: Final = "SS_LOCAL_HOST"
LOCAL_PORT_VAR: Final = "SS_LOCAL_PORT"
PLUGIN_OPTIONS_VAR: Final = "SS_PLUGIN_OPTIONS"


@dataclass(frozen=True)
class ResolvedConfig:
    """Connection parameters handed to the collector by the plugin host.

    Attributes:
        remote_host: Address of the remote management host
        remote_port: Port of the remote management host
        local_host: Local bind address used by the proxy
        local_port: Local bind port used by the proxy
        options: Extension options decoded from ``SS_PLUGIN_OPTIONS``
    """

    remote_host: str
    remote_port: int
    local_host: str
    local_port: int
    options: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))

    @property
    def remote_address(self) -> tuple[str, int]:
        return self.remote_host, self.remote_port

    @property
    def local_address(self) -> tuple[str, int]:
        return self.local_host, self.local_port

    def as_dict(self) -> dict[str, Any]:
        """Return a plain, mutable copy of the configuration."""
        return {
            "remote_host": self.remote_host,
            "remote_port": self.remote_port,
            "local_host": self.local_host,
            "local_port": self.local_port,
            "options": dict(self.options),
        }


class ConfigStore:
    """Lazily resolved, cached holder of the collector configuration.

    A failed resolution is not cached: the error propagates to the caller and
    the next ``get()`` reads the environment again.
    """

    def __init__(self, env: EnvironmentAccessor | None = None) -> None:
        """Initialize an empty store.

        Args:
            env: Environment accessor to resolve from (default: process environment)
        """
        self._env = env or EnvironmentAccessor()
        self._config: ResolvedConfig | None = None
        self._lock = threading.Lock()

    @property
    def is_resolved(self) -> bool:
        return self._config is not None

    def get(self) -> ResolvedConfig:
        """Return the configuration, resolving it on first call.

        Returns:
            ResolvedConfig: The cached configuration

        Raises:
            MissingVariableError: A required variable is unset or illegal
        """
        config = self._config
        if config is not None:
            return config

        with self._lock:
            if self._config is None:
                self._config = self._resolve()
            return self._config

    def reset(self) -> None:
        """Drop the cached configuration so the next ``get()`` resolves again."""
        with self._lock:
            self._config = None

    def _resolve(self) -> ResolvedConfig:
        remote_host = self._require(self._env.read_string, REMOTE_HOST_VAR)
        remote_port = self._require(self._env.read_port, REMOTE_PORT_VAR)
        local_host = self._require(self._env.read_string, LOCAL_HOST_VAR)
        local_port = self._require(self._env.read_port, LOCAL_PORT_VAR)

        options: dict[str, str] = {}
        plugin_opts = self._env.read_string(PLUGIN_OPTIONS_VAR)
        if plugin_opts is not None:
            logger.debug(f"Plugin options: {plugin_opts}")
            options = parse_plugin_options(plugin_opts)

        config = ResolvedConfig(
            remote_host=remote_host,
            remote_port=remote_port,
            local_host=local_host,
            local_port=local_port,
            options=MappingProxyType(options),
        )
        logger.info(
            f"Collector configured: remote {remote_host}:{remote_port}, "
            f"local {local_host}:{local_port}, {len(options)} plugin option(s)"
        )
        return config

    @staticmethod
    def _require(read, name: str):
        value = read(name)
        if value is None:
            logger.error(f"Environment variable {name!r} is not set or illegal")
            raise MissingVariableError(name)
        return value


# Global configuration store
config_store = ConfigStore()


def get_config() -> ResolvedConfig:
    """Return the process-wide collector configuration."""
    return config_store.get()
