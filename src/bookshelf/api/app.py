"""
Main FastAPI application for Bookshelf
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import DocumentStore

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the document store at startup and close it at shutdown."""
    store: DocumentStore = app.state.store

    logger.info("Starting Bookshelf API...")
    store.open()

    try:
        ok, error = await store.ping()
        if not ok:
            logger.error("Document store is not reachable", error=error)
            if settings.environment.lower() in ("production", "prod"):
                raise RuntimeError(error)
        elif settings.create_collections_on_startup:
            await store.create_collections()

        yield

        logger.info("Shutting down Bookshelf API...")
    finally:
        await store.close()


def create_app(store: DocumentStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Document store handle to serve from. Defaults to one built
            from ``settings.database_url``.
    """
    app = FastAPI(
        title="Bookshelf API",
        description="GraphQL API over books, authors, and notes",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store or DocumentStore()

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(graphiql=settings.debug), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
