"""
Collection primitives over stored records: find, save, update, remove.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import delete, select, update

from ..logging import get_logger
from .models import Authors, Books, Notes

if TYPE_CHECKING:
    from .connection import DocumentStore

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", Authors, Books, Notes)


@dataclass
class RemoveResult(Generic[RecordT]):
    """Outcome of a keyed removal."""

    first: RecordT | None
    deleted_count: int


class Collection(Generic[RecordT]):
    """Find/save/update/remove primitives for one record model."""

    def __init__(self, store: DocumentStore, model: type[RecordT]):
        self._store = store
        self.model = model
        self.name = model.__tablename__

    def _column(self, field: str) -> Any:
        if field not in self.model.__table__.columns:
            raise ValueError(f"Unknown field '{field}' for collection '{self.name}'")
        return getattr(self.model, field)

    def _conditions(self, filters: dict[str, Any]) -> list[Any]:
        return [self._column(field) == value for field, value in filters.items()]

    async def find_by_id(self, record_id: str | None) -> RecordT | None:
        """Fetch a single record by id. Returns None for a missing id or record."""
        if not record_id:
            return None

        async with self._store.session(self.name, "find_by_id") as session:
            stmt = select(self.model).where(self.model.id == str(record_id))
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def find(self, **filters: Any) -> list[RecordT]:
        """Fetch every record matching ``filters`` exactly, in insertion order."""
        conditions = self._conditions(filters)

        async with self._store.session(self.name, "find") as session:
            stmt = select(self.model).where(*conditions).order_by(self.model.seq)
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def save(self, **fields: Any) -> RecordT:
        """Persist a new record. The store assigns its id."""
        async with self._store.session(self.name, "save") as session:
            record = self.model(**fields)
            session.add(record)
            await session.flush()
            await session.refresh(record)
            return record

    async def update_first(self, filters: dict[str, Any], values: dict[str, Any]) -> RecordT | None:
        """
        Overwrite ``values`` on the earliest-inserted record matching ``filters``.

        Only that one record is touched even when several share the key. Returns
        the record as stored after the update, or None when nothing matched.
        """
        conditions = self._conditions(filters)
        for field in values:
            self._column(field)

        async with self._store.session(self.name, "update_first") as session:
            target_stmt = (
                select(self.model.id).where(*conditions).order_by(self.model.seq).limit(1)
            )
            target_id = (await session.execute(target_stmt)).scalar_one_or_none()
            if target_id is None:
                return None

            await session.execute(
                update(self.model)
                .where(self.model.id == target_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )

            refreshed = await session.execute(
                select(self.model)
                .where(self.model.id == target_id)
                .execution_options(populate_existing=True)
            )
            return refreshed.scalar_one()

    async def remove(self, **filters: Any) -> RemoveResult[RecordT]:
        """
        Delete every record matching ``filters`` in a single transaction.

        Returns the earliest-inserted removed record, as it was before
        deletion, together with the number of records removed.
        """
        conditions = self._conditions(filters)

        async with self._store.session(self.name, "remove") as session:
            matches_stmt = select(self.model).where(*conditions).order_by(self.model.seq)
            matches = list((await session.execute(matches_stmt)).scalars().all())
            if not matches:
                return RemoveResult(first=None, deleted_count=0)

            result = await session.execute(
                delete(self.model)
                .where(*conditions)
                .execution_options(synchronize_session=False)
            )
            deleted_count = result.rowcount

            logger.debug("Records removed", collection=self.name, deleted_count=deleted_count)
            return RemoveResult(first=matches[0], deleted_count=deleted_count)
