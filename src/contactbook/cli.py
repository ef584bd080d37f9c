#!/usr/bin/env python3
"""
Main CLI entry point for the Contact Book server.
"""

import asyncio
import sys

import click
import uvicorn

from contactbook import __version__
from contactbook.config import settings
from contactbook.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="contactbook")
def cli() -> None:
    """Contact Book CLI - run the GraphQL server and manage the database."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option(
    "--reload",
    is_flag=True,
    default=settings.api_reload,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Contact Book API server."""
    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting Contact Book API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    try:
        uvicorn.run(
            "contactbook.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("init-db")
@click.option(
    "--database-url",
    default=None,
    help="Database URL (default: CONTACTBOOK_DATABASE_URL or settings)",
)
def init_db(database_url: str | None) -> None:
    """Create the contacts table if it does not exist."""
    from contactbook.database import open_gateway

    configure_logging()

    async def do_init() -> None:
        async with open_gateway(database_url, create_schema=True):
            pass

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        click.echo(f"✗ Error initializing database: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Database initialized")


if __name__ == "__main__":
    cli()
