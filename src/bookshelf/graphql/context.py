"""
Per-request GraphQL context
"""

from typing import Any

import strawberry
from fastapi import Request

from ..store import DocumentStore, StoreNotInitializedError


async def get_context(request: Request) -> dict[str, Any]:
    """Build the context for GraphQL resolvers from the app's store handle."""
    return {
        "request": request,
        "store": request.app.state.store,
    }


def get_store(info: strawberry.Info) -> DocumentStore:
    """Get the document store injected into the request context."""
    store = info.context.get("store")
    if store is None:
        raise StoreNotInitializedError("No document store in GraphQL context")
    return store
