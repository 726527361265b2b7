"""Typed access to the environment variables set by the plugin host.

Under SIP003 the shadowsocks process hands every connection parameter to the
plugin through environment variables. This module reads them one at a time
and reports whether each one is present and valid. Absence is signalled with
``None``; it is up to the caller to turn that into an error.

Example:
    env = EnvironmentAccessor()
    port = env.read_port("SS_REMOTE_PORT")
    if port is None:
        raise MissingVariableError("SS_REMOTE_PORT")
"""

import os
from collections.abc import Mapping
from typing import Final

MIN_PORT: Final = 1
MAX_PORT: Final = 65535


class EnvironmentAccessor:
    """Fallible, typed reads of named environment variables.

    Nothing is cached here. Every call goes back to the underlying mapping,
    so callers that need a stable view must keep the results themselves.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialize the accessor.

        Args:
            environ: Mapping to read from (default: ``os.environ``)
        """
        self._environ = os.environ if environ is None else environ

    def read_string(self, name: str) -> str | None:
        """Return the value of *name*, or None when it is unset or empty."""
        value = self._environ.get(name)
        if not value:
            return None
        return value

    def read_port(self, name: str) -> int | None:
        """Return *name* parsed as a TCP/UDP port number.

        Args:
            name: Environment variable name

        Returns:
            int | None: Port in 1-65535, or None when the variable is unset,
            is not a plain base-10 number, is zero or is out of range
        """
        text = self.read_string(name)
        if text is None:
            return None
        # int() alone would accept signs, surrounding blanks and underscores
        if not (text.isascii() and text.isdigit()):
            return None
        # Bounded before int() so huge inputs never hit the digit limit
        digits = text.lstrip("0")
        if len(digits) > len(str(MAX_PORT)):
            return None
        port = int(digits or "0", 10)
        if port < MIN_PORT or port > MAX_PORT:
            return None
        return port
