#!/usr/bin/env python3
"""
Main CLI entry point for the Hackernews backend server.
"""

import asyncio
import os
import sys
from collections.abc import Awaitable, Callable
from typing import TypeVar

import click
import uvicorn

from hackernews import __version__
from hackernews.config import Settings, settings
from hackernews.logging import configure_logging, get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def run_with_repository(action: Callable[..., Awaitable[T]]) -> T:
    """Run ``action(repository)`` against a fresh client, closing it afterwards."""
    from hackernews.database import close_mongo_client, create_mongo_client, get_links_collection
    from hackernews.links import LinkRepository

    async def runner() -> T:
        client = create_mongo_client(settings)
        try:
            repository = LinkRepository(get_links_collection(client, settings))
            return await action(repository)
        finally:
            await close_mongo_client(client)

    return asyncio.run(runner())


@click.group()
@click.version_option(version=__version__, prog_name="hackernews")
def cli() -> None:
    """Hackernews CLI - run the server and manage links."""
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
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--workers",
    default=1,
    type=int,
    help="Number of worker processes (default: 1)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    workers: int,
    log_level: str,
) -> None:
    """Start the Hackernews API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Hackernews API server",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )

    # The app reads these at import time in reload/worker subprocesses
    if log_level == "debug":
        os.environ["HACKERNEWS_DEBUG"] = "true"
        os.environ["HACKERNEWS_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("HACKERNEWS_DEBUG", "false")
        os.environ.setdefault("HACKERNEWS_LOG_LEVEL", log_level)

    try:
        if reload or workers > 1:
            uvicorn.run(
                "hackernews.api.app:app",
                host=host,
                port=port,
                reload=reload,
                workers=(workers if not reload else 1),  # reload doesn't work with multiple workers
                log_level=log_level,
                access_log=True,
            )
        else:
            from hackernews.api.app import create_app

            # Settings were loaded before the flags above reached the environment
            config = Settings()
            app = create_app(config)
            configure_logging(debug=config.debug, log_level=config.log_level)

            uvicorn.run(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def seed() -> None:
    """Insert the sample links into the links collection."""
    from hackernews.database.seed_data import seed_sample_links

    configure_logging()

    try:
        created = run_with_repository(seed_sample_links)
    except Exception as e:
        logger.error("Failed to seed database", error=str(e))
        click.echo(f"✗ Error seeding database: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Seeded {len(created)} link(s)")
    for link in created:
        click.echo(f"  {link.id}  {link.url}")


@cli.command("links")
def list_links() -> None:
    """List all stored links."""
    configure_logging()

    async def fetch(repository):
        return await repository.get_all()

    try:
        links = run_with_repository(fetch)
    except Exception as e:
        logger.error("Failed to list links", error=str(e))
        click.echo(f"✗ Error listing links: {e}", err=True)
        sys.exit(1)

    if not links:
        click.echo("No links found.")
        return

    click.echo(f"Found {len(links)} link(s):")
    click.echo()
    for link in links:
        click.echo(f"  ID: {link.id}")
        click.echo(f"  URL: {link.url}")
        click.echo(f"  Description: {link.description}")
        click.echo()


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
