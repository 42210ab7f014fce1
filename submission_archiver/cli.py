"""Command line interface for the submission archiver."""

from __future__ import annotations

from pathlib import Path

import click
import typer
from loguru import logger

from . import bootstrap
from .bootstrap import BootstrapError
from .config import ConfigError, ConfigParseError, ConfigReadError

DEFAULT_CONFIG_NAME = "config.toml"

EXIT_OK = 0
EXIT_UNREADABLE = 2
EXIT_INVALID = 3
EXIT_BOOTSTRAP = 4

app = typer.Typer(help="Archive AtCoder submissions into a local repository", add_completion=False)


def _exit(code: int) -> None:
    raise typer.Exit(code)


def _report_config_error(exc: ConfigError) -> int:
    if isinstance(exc, ConfigReadError):
        logger.error("Configuration error (unreadable) for {}: {}", exc.path, exc.reason)
        return EXIT_UNREADABLE
    if isinstance(exc, ConfigParseError):
        logger.error("Configuration error (invalid) for {}: {}", exc.path, exc)
        for detail in exc.details:
            location = detail["loc"] or "<root>"
            logger.error("  - {}: {} ({})", location, detail["message"], detail["type"])
        return EXIT_INVALID
    logger.error("Configuration error for {}: {}", exc.path, exc)
    return EXIT_INVALID


@app.command(help="Load the configuration and prepare the archiver state directory")
def run(
    config_path: Path = typer.Argument(
        Path(DEFAULT_CONFIG_NAME),
        help="Path to the TOML configuration file",
        show_default=True,
    ),
) -> None:
    try:
        bootstrap.run(config_path)
    except ConfigError as exc:
        _exit(_report_config_error(exc))
    except BootstrapError as exc:
        logger.error("Startup failed: {}", exc)
        _exit(EXIT_BOOTSTRAP)
    _exit(EXIT_OK)


def main(argv: list[str] | None = None) -> int:
    """Entry point compatible with setuptools console scripts."""

    try:
        result = app(args=argv, standalone_mode=False)
    except typer.Exit as exc:  # pragma: no cover - Typer translates exit codes
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    if isinstance(result, int):
        return result
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
