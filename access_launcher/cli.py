"""
Access Launcher command-line entrypoint.

Usage:
    access-launcher            start the launcher window
    access-launcher --help
    access-launcher --version
"""

from __future__ import annotations

import logging
import os

import click

from . import __version__
from .config import LauncherConfig


def _parse_level(level: str | None) -> int:
    """Convert a level name to its numeric constant, WARNING if unknown."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric


def setup_logging(debug: bool) -> None:
    if debug:
        level = logging.DEBUG
    else:
        level = _parse_level(os.environ.get("ACCESS_LAUNCHER_LOG_LEVEL"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-v", "--version", prog_name="access-launcher")
@click.option("--debug", is_flag=True, help="Log why individual desktop files are skipped.")
def cli(debug: bool) -> None:
    """List installed applications by category and launch them.

    Running without options starts the application.
    """
    setup_logging(debug)

    from .ui import run

    run(LauncherConfig.from_environ())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
