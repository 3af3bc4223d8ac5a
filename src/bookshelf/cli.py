#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf server.
"""

import asyncio
import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - run the API server and manage the document store."""
    pass


@cli.command()
@click.option(
    "--host", default=settings.api_host, help=f"Host to bind to (default: {settings.api_host})"
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the Bookshelf API server."""
    debug = log_level == "debug"
    configure_logging(debug=debug)

    logger.info("Starting Bookshelf API server", host=host, port=port, reload=reload)

    # Applied in-process and exported for the reload worker, which builds
    # its own settings from the environment
    if debug:
        settings.debug = True
    settings.log_level = log_level.upper()
    os.environ["BOOKSHELF_DEBUG"] = "true" if settings.debug else "false"
    os.environ["BOOKSHELF_LOG_LEVEL"] = log_level

    try:
        uvicorn.run(
            "bookshelf.api.app:app",
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
@click.option("--database-url", default=None, help="Override BOOKSHELF_DATABASE_URL")
def init_db(database_url: str | None) -> None:
    """Create the authors, books, and notes collections."""
    from bookshelf.store import DocumentStore

    configure_logging()

    async def do_init():
        store = DocumentStore(database_url)
        store.open()
        try:
            await store.create_collections()
        finally:
            await store.close()

    try:
        asyncio.run(do_init())
    except Exception as e:
        logger.error("Failed to create collections", error=str(e))
        click.echo(f"✗ Error creating collections: {e}", err=True)
        sys.exit(1)

    click.echo("✓ Collections created")


@cli.command("check-db")
@click.option("--database-url", default=None, help="Override BOOKSHELF_DATABASE_URL")
def check_db(database_url: str | None) -> None:
    """Check that the document store is reachable."""
    from bookshelf.store import DocumentStore

    configure_logging()

    async def do_check() -> tuple[bool, str | None]:
        store = DocumentStore(database_url)
        store.open()
        try:
            return await store.ping()
        finally:
            await store.close()

    ok, error = asyncio.run(do_check())
    if not ok:
        click.echo(f"✗ {error}", err=True)
        sys.exit(1)

    click.echo("✓ Document store is reachable")


@cli.command()
@click.option("--database-url", default=None, help="Override BOOKSHELF_DATABASE_URL")
def seed(database_url: str | None) -> None:
    """Seed the document store with sample authors, books, and notes."""
    from bookshelf.store import DocumentStore
    from bookshelf.store.seed_data import seed_sample_data

    configure_logging()

    async def do_seed() -> dict[str, int]:
        store = DocumentStore(database_url)
        store.open()
        try:
            await store.create_collections()
            return await seed_sample_data(store)
        finally:
            await store.close()

    try:
        created = asyncio.run(do_seed())
    except Exception as e:
        logger.error("Failed to seed document store", error=str(e))
        click.echo(f"✗ Error seeding document store: {e}", err=True)
        sys.exit(1)

    click.echo(
        f"✓ Seeded {created['authors']} author(s), {created['books']} book(s), "
        f"{created['notes']} note(s)"
    )


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
