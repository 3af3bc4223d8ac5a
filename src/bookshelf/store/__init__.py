"""
Document store for Bookshelf records
"""

from .collections import Collection, RemoveResult
from .connection import DocumentStore
from .errors import StoreError, StoreNotInitializedError
from .models import Authors, Books, Notes

__all__ = [
    "Authors",
    "Books",
    "Collection",
    "DocumentStore",
    "Notes",
    "RemoveResult",
    "StoreError",
    "StoreNotInitializedError",
]
