from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store
from .records import author_from_record, book_from_record

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


# Query resolvers
async def resolve_author_by_id(info: strawberry.Info, id: str | None) -> Author | None:
    """Resolve an author by its ID. A missing author is None, not an error."""
    record = await get_store(info).authors.find_by_id(id)
    if record is None:
        logger.info("Author not found", author_id=id)
        return None
    return author_from_record(record)


async def resolve_authors(info: strawberry.Info) -> list[Author]:
    records = await get_store(info).authors.find()
    return [author_from_record(record) for record in records]


# Author field resolvers
async def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    """Resolve the books whose authorId references this author."""
    records = await get_store(info).books.find(author_id=str(author.id))
    return [book_from_record(record) for record in records]


# Mutation resolvers
async def add_author(info: strawberry.Info, name: str, age: int) -> Author:
    record = await get_store(info).authors.save(name=name, age=age)
    logger.info("Author added", author_id=record.id, name=name)
    return author_from_record(record)


async def remove_author(info: strawberry.Info, name: str) -> Author | None:
    """
    Remove every author with this exact name.

    Books referencing the removed authors are left in place. Returns the
    first removed author, or None if no author had the name.
    """
    result = await get_store(info).authors.remove(name=name)
    if result.first is None:
        logger.info("No author to remove", name=name)
        return None

    logger.info(
        "Author removed",
        author_id=result.first.id,
        name=name,
        deleted_count=result.deleted_count,
    )
    return author_from_record(result.first)


async def update_author(
    info: strawberry.Info, current_name: str, new_name: str, age: int
) -> Author | None:
    """
    Update the first author (by creation order) named ``current_name``.

    Returns the updated author, or None if no author had the name.
    """
    record = await get_store(info).authors.update_first(
        {"name": current_name}, {"name": new_name, "age": age}
    )
    if record is None:
        logger.info("No author to update", current_name=current_name)
        return None

    logger.info("Author updated", author_id=record.id, current_name=current_name, name=new_name)
    return author_from_record(record)
