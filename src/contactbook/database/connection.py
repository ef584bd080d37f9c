"""
Database connection management
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from ..config import settings
from ..logging import get_logger
from .gateway import StorageGateway

logger = get_logger(__name__)


def get_async_database_url(database_url: str | None = None) -> str:
    """Return the database URL with the aiosqlite driver selected."""
    db_url = database_url or settings.database_url
    if db_url.startswith("sqlite://"):
        db_url = db_url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return db_url


def is_memory_database(database_url: str) -> bool:
    """Whether the URL names a private in-memory SQLite database."""
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_database_engine(database_url: str | None = None, echo: bool | None = None) -> AsyncEngine:
    """Create the async engine backing a storage gateway."""
    db_url = get_async_database_url(database_url)
    kwargs: dict[str, Any] = {"echo": settings.sql_echo if echo is None else echo}

    if is_memory_database(db_url):
        # Every connection to :memory: is a new database; share a single one
        kwargs["poolclass"] = StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}

    engine = create_async_engine(db_url, **kwargs)
    logger.info("Database engine created", database_url=db_url)
    return engine


def create_gateway(database_url: str | None = None, echo: bool | None = None) -> StorageGateway:
    """Build a storage gateway over a fresh engine."""
    return StorageGateway(create_database_engine(database_url, echo=echo))


@asynccontextmanager
async def open_gateway(
    database_url: str | None = None, create_schema: bool = True
) -> AsyncIterator[StorageGateway]:
    """Open a gateway for the duration of the block and dispose of it afterwards."""
    gateway = create_gateway(database_url)
    try:
        if create_schema:
            await gateway.create_schema()
        yield gateway
    finally:
        await gateway.close()
