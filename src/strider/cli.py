"""
CLI entry point for Strider.

Prints the confirmed directory on stdout so a shell can change into it:

    cd "$(strider)"

Modified: 2026-10-19
"""

import sys
import click
from pathlib import Path
from typing import Optional
from strider import __version__
from strider.config.settings import Settings
from strider.core.exceptions import (
    ConfigurationError,
    DirectoryUnreadableError,
    StartupUnresolvableError,
)
from strider.core.navigation import resolve_start_path
from strider.utils.logging import setup_logging


@click.command()
@click.version_option(version=__version__)
@click.argument("path", required=False, type=click.Path(path_type=Path))
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to config file (default: ~/.config/strider/config.yaml)",
)
@click.option(
    "--choosedir",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write the chosen directory to this file instead of stdout",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level",
)
@click.option("--keys", is_flag=True, help="Show key bindings and exit")
def main(
    path: Optional[Path],
    config_path: Optional[Path],
    choosedir: Optional[Path],
    log_level: Optional[str],
    keys: bool,
):
    """Browse directories from PATH (default: the working directory)."""
    if keys:
        from strider.tui.keybindings import registry

        click.echo(registry.format_help_text())
        return

    try:
        settings = Settings.load(config_path)
        if log_level:
            settings.logging.level = log_level
        setup_logging(settings)
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)

    try:
        start_path = resolve_start_path(path or settings.browser.start_path)
    except StartupUnresolvableError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    try:
        from strider.tui.app import run_app

        chosen = run_app(start_path, settings=settings)
    except DirectoryUnreadableError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        return

    if chosen is None:
        return

    if choosedir:
        choosedir.write_text(f"{chosen}\n")
    else:
        click.echo(str(chosen))


if __name__ == "__main__":
    main()
