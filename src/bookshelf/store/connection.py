"""
Document store connection management
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from ..config import settings
from ..logging import get_logger
from .collections import Collection
from .errors import StoreError, StoreNotInitializedError
from .models import Authors, Base, Books, Notes

logger = get_logger(__name__)


def to_async_url(database_url: str) -> str:
    """Map a plain database URL onto its async driver."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("sqlite://"):
        return database_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return database_url


def _is_memory_sqlite(async_url: str) -> bool:
    return async_url.startswith("sqlite") and (
        ":memory:" in async_url or async_url.rstrip("/").endswith("aiosqlite:")
    )


class DocumentStore:
    """
    Process-wide handle on the document store.

    Open it once at startup and close it at shutdown. Each collection call
    runs in its own session that commits on success and rolls back on error.
    """

    def __init__(self, database_url: str | None = None, *, echo: bool | None = None):
        self.database_url = database_url or settings.database_url
        self.echo = settings.sql_echo if echo is None else echo
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

        self.authors: Collection[Authors] = Collection(self, Authors)
        self.books: Collection[Books] = Collection(self, Books)
        self.notes: Collection[Notes] = Collection(self, Notes)

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> None:
        """Create the engine and session factory. Calling it twice is a no-op."""
        if self._engine is not None:
            return

        async_url = to_async_url(self.database_url)
        engine_kwargs: dict[str, Any] = {"echo": self.echo}
        if _is_memory_sqlite(async_url):
            # One shared connection, otherwise every session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        elif not async_url.startswith("sqlite"):
            engine_kwargs["pool_size"] = settings.database_pool_size
            engine_kwargs["max_overflow"] = settings.database_max_overflow

        self._engine = create_async_engine(async_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )
        logger.info("Document store opened", database_url=self._redacted_url())

    async def close(self) -> None:
        if self._engine is None:
            return

        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Document store closed")

    def _redacted_url(self) -> str:
        scheme, sep, rest = self.database_url.partition("://")
        if "@" not in rest:
            return self.database_url
        return f"{scheme}{sep}***@{rest.split('@', 1)[1]}"

    @asynccontextmanager
    async def session(
        self, collection: str | None = None, operation: str | None = None
    ) -> AsyncGenerator[AsyncSession, None]:
        """Get a session; store driver errors are re-raised as StoreError."""
        if self._session_factory is None:
            raise StoreNotInitializedError(
                "Document store is not open", collection=collection, operation=operation
            )

        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except SQLAlchemyError as e:
                await session.rollback()
                logger.error(
                    "Document store operation failed",
                    collection=collection,
                    operation=operation,
                    error=str(e),
                )
                raise StoreError(
                    f"Document store operation failed: {e}",
                    collection=collection,
                    operation=operation,
                ) from e
            except Exception:
                await session.rollback()
                raise

    async def create_collections(self) -> None:
        """Create any missing collections."""
        if self._engine is None:
            raise StoreNotInitializedError("Document store is not open")

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Collections ready", collections=sorted(Base.metadata.tables))

    async def drop_collections(self) -> None:
        """Drop every collection along with its records."""
        if self._engine is None:
            raise StoreNotInitializedError("Document store is not open")

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("Collections dropped")

    async def ping(self) -> tuple[bool, str | None]:
        """
        Test the store connection and return a helpful error message.

        Returns:
            tuple: (success: bool, error_message: str | None)
        """
        if self._engine is None:
            return False, "Document store not opened"

        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                return True, None
        except Exception as e:
            error_str = str(e)
            error_type = type(e).__name__

            if "does not exist" in error_str:
                db_name = self.database_url.split("/")[-1].split("?")[0]
                return False, (
                    f"Cannot connect to document store: {error_str}\n"
                    f"This usually means:\n"
                    f"  1. The database '{db_name}' doesn't exist\n"
                    f"  2. The database user/role doesn't exist\n"
                    f"Please check BOOKSHELF_DATABASE_URL."
                )
            elif "Connection refused" in error_str or "could not connect" in error_str:
                return False, (
                    f"Cannot connect to document store server: {error_str}\n"
                    f"The server appears to be down or unreachable."
                )
            elif "password authentication failed" in error_str:
                return False, (
                    f"Document store authentication failed: {error_str}\n"
                    f"Please check your credentials."
                )
            else:
                return False, f"Document store connection error ({error_type}): {error_str}"
