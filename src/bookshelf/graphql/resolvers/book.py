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
async def resolve_book_by_id(info: strawberry.Info, id: str | None) -> Book | None:
    """Resolve a book by its ID. A missing book is None, not an error."""
    record = await get_store(info).books.find_by_id(id)
    if record is None:
        logger.info("Book not found", book_id=id)
        return None
    return book_from_record(record)


async def resolve_books(info: strawberry.Info) -> list[Book]:
    records = await get_store(info).books.find()
    return [book_from_record(record) for record in records]


# Book field resolvers
async def resolve_book_author(book: Book, info: strawberry.Info) -> Author | None:
    """
    Resolve the author referenced by ``book.author_id``.

    Author ids are not checked when books are written, so a dangling
    reference resolves to None.
    """
    record = await get_store(info).authors.find_by_id(book.author_id)
    if record is None:
        logger.debug("Book author not found", book_id=book.id, author_id=book.author_id)
        return None
    return author_from_record(record)


# Mutation resolvers
async def add_book(info: strawberry.Info, name: str, genre: str, author_id: str) -> Book:
    record = await get_store(info).books.save(name=name, genre=genre, author_id=str(author_id))
    logger.info("Book added", book_id=record.id, name=name, author_id=record.author_id)
    return book_from_record(record)


async def remove_book(info: strawberry.Info, name: str) -> Book | None:
    """
    Remove every book with this exact name.

    Returns the first removed book, or None if no book had the name.
    """
    result = await get_store(info).books.remove(name=name)
    if result.first is None:
        logger.info("No book to remove", name=name)
        return None

    logger.info(
        "Book removed", book_id=result.first.id, name=name, deleted_count=result.deleted_count
    )
    return book_from_record(result.first)


async def update_book(
    info: strawberry.Info, current_name: str, new_name: str, genre: str, author_id: str
) -> Book | None:
    """
    Update the first book (by creation order) named ``current_name``.

    Returns the updated book, or None if no book had the name.
    """
    record = await get_store(info).books.update_first(
        {"name": current_name},
        {"name": new_name, "genre": genre, "author_id": str(author_id)},
    )
    if record is None:
        logger.info("No book to update", current_name=current_name)
        return None

    logger.info(
        "Book updated",
        book_id=record.id,
        current_name=current_name,
        updated_fields=["name", "genre", "author_id"],
    )
    return book_from_record(record)
