"""Custom exceptions for the collector plugin.

This module defines the exceptions raised while the collector resolves its
configuration from the environment. They give callers a typed way to handle:
- Missing required variables
- Required variables holding illegal values

The caller (normally the plugin entry point) decides whether to exit, report
upward or retry.

Example:
    try:
        config = get_config()
    except MissingVariableError as e:
        console.print(f"[red]{e}")
        raise typer.Exit(code=1) from e
"""


class CollectorError(Exception):
    """Base exception for collector errors."""


class ConfigError(CollectorError):
    """Raised when the collector configuration cannot be resolved."""


class MissingVariableError(ConfigError):
    """Raised when a required environment variable is unset or illegal."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f'Environment variable "{variable}" is not set or illegal!')
