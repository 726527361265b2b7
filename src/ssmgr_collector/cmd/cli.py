"""Command-line entry point of the collector plugin.

The shadowsocks host launches the plugin with its parameters in the
environment (SIP003). This module provides the Typer application that:
- Resolves the collector configuration once at startup
- Reports missing or illegal variables and exits non-zero
- Shows the resolved configuration for troubleshooting

Example:
    # Run from command line with the variables a host would set:
    $ SS_REMOTE_HOST=10.0.0.1 SS_REMOTE_PORT=6001 \\
      SS_LOCAL_HOST=127.0.0.1 SS_LOCAL_PORT=8388 \\
      ssmgr-collector config
"""

from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ssmgr_collector import __version__
from ssmgr_collector.core.config import ResolvedConfig, get_config
from ssmgr_collector.core.exceptions import ConfigError
from ssmgr_collector.core.utils.log_config import LOG_DIR, setup_logging

console = Console()
app = typer.Typer(help="Traffic collector plugin for shadowsocks (SIP003)")


def render_config(config: ResolvedConfig) -> Table:
    """Build a table describing the resolved configuration."""
    table = Table(title="Collector Configuration")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Remote", escape(f"{config.remote_host}:{config.remote_port}"))
    table.add_row("Local", escape(f"{config.local_host}:{config.local_port}"))
    if not config.options:
        table.add_row("Plugin options", "-")
    for key, value in sorted(config.options.items()):
        table.add_row(f"option {escape(key)}", escape(value))
    return table


@app.callback(invoke_without_command=True)
def version_callback():
    """Show version information."""
    console.print(f"[cyan]ssmgr collector v{__version__}[/cyan]")


@app.command(name="config")
def show_config(
    debug: bool = typer.Option(
        default=False,
        help="Enable debug logging",
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Also write logs to this file (rotated)"
    ),
):
    """Resolve the configuration from the environment and print it."""
    if debug:
        setup_logging("DEBUG", log_file or LOG_DIR / "collector.log")
    else:
        setup_logging(log_file=log_file)

    try:
        config = get_config()
    except ConfigError as e:
        logger.error(f"Configuration failed: {e}")
        console.print(f"[red]Error: {escape(str(e))}")
        raise typer.Exit(code=1) from e

    console.print(render_config(config))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
