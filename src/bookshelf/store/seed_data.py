"""
Sample data for a fresh document store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..logging import get_logger

if TYPE_CHECKING:
    from .connection import DocumentStore

logger = get_logger(__name__)

SAMPLE_LIBRARY: list[dict] = [
    {
        "name": "J. R. R. Tolkien",
        "age": 81,
        "books": [
            {"name": "The Hobbit", "genre": "Fantasy"},
            {"name": "The Fellowship of the Ring", "genre": "Fantasy"},
        ],
    },
    {
        "name": "Ursula K. Le Guin",
        "age": 88,
        "books": [
            {"name": "A Wizard of Earthsea", "genre": "Fantasy"},
            {"name": "The Left Hand of Darkness", "genre": "Sci-Fi"},
        ],
    },
    {
        "name": "Terry Pratchett",
        "age": 66,
        "books": [{"name": "Guards! Guards!", "genre": "Fantasy"}],
    },
]

SAMPLE_NOTES: list[dict[str, str]] = [
    {"title": "Reading list", "description": "Finish the Earthsea cycle before spring."},
]


async def seed_sample_data(store: DocumentStore) -> dict[str, int]:
    """
    Insert the sample authors, books, and notes.

    Authors that already exist by name are reused, so seeding twice does not
    duplicate them; books and notes are only added for newly created authors
    and missing titles.

    Returns:
        Counts of records created per collection
    """
    created = {"authors": 0, "books": 0, "notes": 0}

    for entry in SAMPLE_LIBRARY:
        existing = await store.authors.find(name=entry["name"])
        if existing:
            logger.debug("Sample author already present", name=entry["name"])
            continue

        author = await store.authors.save(name=entry["name"], age=entry["age"])
        created["authors"] += 1

        for book in entry["books"]:
            await store.books.save(name=book["name"], genre=book["genre"], author_id=author.id)
            created["books"] += 1

    for note in SAMPLE_NOTES:
        if await store.notes.find(title=note["title"]):
            continue
        await store.notes.save(**note)
        created["notes"] += 1

    logger.info("Sample data seeded", **created)
    return created
