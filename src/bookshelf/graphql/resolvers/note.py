from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store
from .records import note_from_record

if TYPE_CHECKING:
    from ..types.note import Note

logger = get_logger(__name__)


async def resolve_note_by_id(info: strawberry.Info, id: str | None) -> Note | None:
    record = await get_store(info).notes.find_by_id(id)
    if record is None:
        logger.info("Note not found", note_id=id)
        return None
    return note_from_record(record)


async def resolve_notes(info: strawberry.Info) -> list[Note]:
    records = await get_store(info).notes.find()
    return [note_from_record(record) for record in records]


async def add_note(info: strawberry.Info, title: str, description: str) -> Note:
    record = await get_store(info).notes.save(title=title, description=description)
    logger.info("Note added", note_id=record.id, title=title)
    return note_from_record(record)


async def remove_note(info: strawberry.Info, title: str) -> Note | None:
    result = await get_store(info).notes.remove(title=title)
    if result.first is None:
        logger.info("No note to remove", title=title)
        return None

    logger.info(
        "Note removed", note_id=result.first.id, title=title, deleted_count=result.deleted_count
    )
    return note_from_record(result.first)


async def update_note(
    info: strawberry.Info, current_title: str, new_title: str, description: str
) -> Note | None:
    record = await get_store(info).notes.update_first(
        {"title": current_title}, {"title": new_title, "description": description}
    )
    if record is None:
        logger.info("No note to update", current_title=current_title)
        return None

    logger.info("Note updated", note_id=record.id, current_title=current_title, title=new_title)
    return note_from_record(record)
