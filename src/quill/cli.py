#!/usr/bin/env python3
"""
Main CLI entry point for Quill backend server.
"""

import click
import uvicorn

from quill import __version__
from quill.config import settings
from quill.database.cli import db
from quill.logging import configure_logging, get_logger

logger = get_logger(__name__)

APP_IMPORT_PATH = "quill.api.app:app"


@click.group()
@click.version_option(version=__version__, prog_name="quill")
def cli() -> None:
    """Quill CLI - run the API server and migrate the database."""
    pass


@cli.command()
@click.option("--host", default=settings.api_host, show_default=True, help="Host to bind to")
@click.option("--port", default=settings.api_port, type=int, show_default=True, help="Port")
@click.option(
    "--reload/--no-reload",
    default=settings.api_reload,
    show_default=True,
    help="Restart on code changes (development only)",
)
@click.option("--workers", default=1, type=click.IntRange(min=1), show_default=True)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"]),
    show_default=True,
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Start the Quill API server.

    Defaults come from QUILL_API_HOST, QUILL_API_PORT, QUILL_API_RELOAD and
    QUILL_LOG_LEVEL.
    """
    configure_logging(debug=(log_level == "debug"))

    if reload and workers > 1:
        logger.warning("Reload runs a single worker; ignoring --workers", workers=workers)
        workers = 1

    logger.info("Starting Quill API server", host=host, port=port, reload=reload, workers=workers)

    # uvicorn needs an import string to spawn reloader or worker processes
    uvicorn.run(
        APP_IMPORT_PATH,
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )


cli.add_command(db)


if __name__ == "__main__":
    cli()
