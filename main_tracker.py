"""Mini README: Entry point CLI for the PocketLedger finance tracker.

This script exposes a Typer CLI with a ``run`` command that starts one
interactive session. Everything recorded lives in memory and is discarded
when the session ends. Logging verbosity comes from settings unless
``--log-level`` overrides it.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer

from pocketledger.configuration import get_settings
from pocketledger.interface import ConsoleSession
from pocketledger.logging_utils import configure_root_logger

cli = typer.Typer(help="Track personal income, expenses and reminders for one session.")


@cli.callback()
def main(
    log_level: Optional[str] = typer.Option(None, help="Logging level, e.g. DEBUG or INFO."),
) -> None:
    """Configure logging before any command runs."""

    level = (log_level or get_settings().log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise typer.BadParameter(f"Unknown log level '{log_level}'", param_hint="--log-level")
    configure_root_logger(level)


@cli.command()
def run() -> None:
    """Start an interactive finance tracker session."""

    ConsoleSession().run()


if __name__ == "__main__":
    cli()
