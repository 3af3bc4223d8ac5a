"""
Note GraphQL type definitions
"""

import strawberry


@strawberry.type
class Note:
    """Note type for GraphQL API."""

    id: strawberry.ID
    title: str
    description: str
