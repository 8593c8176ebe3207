"""CLI entry point for CollegeApp."""

from __future__ import annotations

import click
import uvicorn

from collegeapp import __version__
from collegeapp.api.app import create_app
from collegeapp.config import ConfigError, load_settings
from collegeapp.logging import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="collegeapp")
def main() -> None:
    """CollegeApp - manage student records over HTTP."""
    pass


@main.command()
@click.option("--host", default=None, help="Interface to bind (default: COLLEGEAPP_HOST or 127.0.0.1).")
@click.option("--port", type=int, default=None, help="Port to listen on (default: COLLEGEAPP_PORT or 8000).")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: COLLEGEAPP_LOG_LEVEL or INFO).",
)
@click.option("--seed/--no-seed", default=None, help="Load the two sample students on startup.")
def serve(host: str | None, port: int | None, log_level: str | None, seed: bool | None) -> None:
    """Run the HTTP server."""
    try:
        settings = load_settings(host=host, port=port, log_level=log_level, seed=seed)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    logger = setup_logging(log_dir=settings.log_dir, level=settings.log_level)
    logger.info("Starting CollegeApp on %s:%d (seed=%s)", settings.host, settings.port, settings.seed)

    app = create_app(seed=settings.seed)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
