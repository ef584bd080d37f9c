"""
Database models for the Contact Book (authoritative table definitions).

The column names match the persisted layout
``contacts(id INTEGER PRIMARY KEY, firstName TEXT, lastName TEXT, email TEXT UNIQUE)``;
the mapped attributes use snake_case. The id column is declared AUTOINCREMENT
so ids of deleted contacts are never handed out again.
"""

from sqlalchemy import Integer, MetaData, Table, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Naming convention for deterministic constraint names
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models with type checking support."""

    metadata = MetaData(naming_convention=naming_convention)


class Contacts(Base):
    __tablename__ = "contacts"
    __table_args__ = (UniqueConstraint("email"), {"sqlite_autoincrement": True})

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column("firstName", Text, nullable=False)
    last_name: Mapped[str] = mapped_column("lastName", Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)


# Core table used by the storage gateway's statements
contacts_table: Table = Contacts.__table__  # type: ignore[assignment]

target_metadata = Base.metadata

__all__ = ["Base", "Contacts", "contacts_table", "target_metadata"]
