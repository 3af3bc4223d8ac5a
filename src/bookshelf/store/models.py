"""
Record models for the Bookshelf document store.

Each entity kind lives in its own collection (table). Records carry a
store-assigned string ``id`` and an insertion sequence ``seq`` that defines
"first match" ordering for keyed updates and removals.
"""

from uuid import uuid4

from sqlalchemy import Integer, MetaData, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint/index names
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def generate_record_id() -> str:
    return uuid4().hex


class Base(DeclarativeBase):
    """Base class for all stored records."""

    metadata = MetaData(naming_convention=naming_convention)


class RecordMixin:
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(
        String(32), unique=True, nullable=False, default=generate_record_id
    )


class Authors(RecordMixin, Base):
    __tablename__ = "authors"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False)


class Books(RecordMixin, Base):
    __tablename__ = "books"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    genre: Mapped[str] = mapped_column(String(255), nullable=False)
    # Plain reference, no foreign key: removing an author leaves its books in place
    author_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)


class Notes(RecordMixin, Base):
    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
