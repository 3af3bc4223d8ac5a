"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .author import Author


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: strawberry.ID
    name: str
    genre: str
    author_id: strawberry.ID

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """Get the author this book references, if it still exists."""
        from ..resolvers.book import resolve_book_author

        return await resolve_book_author(self, info)
