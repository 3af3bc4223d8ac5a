"""
Root GraphQL mutation definitions

All arguments are required. Remove and update mutations return the affected
record, or null when no record matched the key.
"""

import strawberry

from ..types.author import Author
from ..types.book import Book
from ..types.note import Note


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Book mutations
    @strawberry.mutation(name="addBook")
    async def add_book(
        self, info: strawberry.Info, name: str, genre: str, author_id: strawberry.ID
    ) -> Book:
        """Add a new book."""
        from ..resolvers.book import add_book

        return await add_book(info, name, genre, author_id)

    @strawberry.mutation(name="removeBook")
    async def remove_book(self, info: strawberry.Info, name: str) -> Book | None:
        """Remove every book with the given name."""
        from ..resolvers.book import remove_book

        return await remove_book(info, name)

    @strawberry.mutation(name="updateBook")
    async def update_book(
        self,
        info: strawberry.Info,
        current_name: str,
        new_name: str,
        genre: str,
        author_id: strawberry.ID,
    ) -> Book | None:
        """Update the first book with the given current name."""
        from ..resolvers.book import update_book

        return await update_book(info, current_name, new_name, genre, author_id)

    # Author mutations
    @strawberry.mutation(name="addAuthor")
    async def add_author(self, info: strawberry.Info, name: str, age: int) -> Author:
        """Add a new author."""
        from ..resolvers.author import add_author

        return await add_author(info, name, age)

    @strawberry.mutation(name="removeAuthor")
    async def remove_author(self, info: strawberry.Info, name: str) -> Author | None:
        """Remove every author with the given name. Their books are kept."""
        from ..resolvers.author import remove_author

        return await remove_author(info, name)

    @strawberry.mutation(name="updateAuthor")
    async def update_author(
        self, info: strawberry.Info, current_name: str, new_name: str, age: int
    ) -> Author | None:
        """Update the first author with the given current name."""
        from ..resolvers.author import update_author

        return await update_author(info, current_name, new_name, age)

    # Note mutations
    @strawberry.mutation(name="addNote")
    async def add_note(self, info: strawberry.Info, title: str, description: str) -> Note:
        """Add a new note."""
        from ..resolvers.note import add_note

        return await add_note(info, title, description)

    @strawberry.mutation(name="removeNote")
    async def remove_note(self, info: strawberry.Info, title: str) -> Note | None:
        """Remove every note with the given title."""
        from ..resolvers.note import remove_note

        return await remove_note(info, title)

    @strawberry.mutation(name="updateNote")
    async def update_note(
        self, info: strawberry.Info, current_title: str, new_title: str, description: str
    ) -> Note | None:
        """Update the first note with the given current title."""
        from ..resolvers.note import update_note

        return await update_note(info, current_title, new_title, description)
