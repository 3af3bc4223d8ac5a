"""Conversion from stored records to GraphQL types."""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...store import Authors, Books, Notes
    from ..types.author import Author
    from ..types.book import Book
    from ..types.note import Note


def author_from_record(record: Authors) -> Author:
    from ..types.author import Author as AuthorType

    return AuthorType(id=strawberry.ID(record.id), name=record.name, age=record.age)


def book_from_record(record: Books) -> Book:
    from ..types.book import Book as BookType

    return BookType(
        id=strawberry.ID(record.id),
        name=record.name,
        genre=record.genre,
        author_id=strawberry.ID(record.author_id),
    )


def note_from_record(record: Notes) -> Note:
    from ..types.note import Note as NoteType

    return NoteType(
        id=strawberry.ID(record.id),
        title=record.title,
        description=record.description,
    )
