"""
Storage gateway: the boundary between GraphQL resolvers and the row store.

Every public coroutine runs exactly one statement on its own connection and
commits before returning, so each write is persisted as soon as the awaiting
resolver resumes. Driver failures are translated into ``StorageError`` (or
``UniqueConstraintViolation`` for duplicate unique values).
"""

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine
from sqlalchemy.sql import Executable

from ..dbmodels import target_metadata
from ..errors import StorageError, UniqueConstraintViolation
from ..logging import get_logger

logger = get_logger(__name__)

Statement = Executable | str
Row = dict[str, Any]


@dataclass(frozen=True)
class ExecuteResult:
    """Outcome of a write statement."""

    rowcount: int
    last_row_id: int | None = None


def _error_message(error: SQLAlchemyError) -> str:
    """Return the driver's message when there is one, else SQLAlchemy's."""
    if isinstance(error, DBAPIError) and error.orig is not None:
        return str(error.orig)
    return str(error)


def _coerce(statement: Statement) -> Executable:
    if isinstance(statement, str):
        return text(statement)
    return statement


class StorageGateway:
    """Issues parameterized statements against an async SQLAlchemy engine."""

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def _begin(self) -> AsyncIterator[AsyncConnection]:
        """Open a connection in a transaction that commits on exit."""
        try:
            async with self._engine.begin() as conn:
                yield conn
        except IntegrityError as e:
            message = _error_message(e)
            if "UNIQUE constraint failed" in message:
                logger.warning("Unique constraint violation", error=message)
                raise UniqueConstraintViolation(message) from e
            logger.error("Integrity error", error=message)
            raise StorageError(message) from e
        except SQLAlchemyError as e:
            message = _error_message(e)
            logger.error("Storage error", error=message, error_type=type(e).__name__)
            raise StorageError(message) from e

    async def execute(
        self, statement: Statement, params: Mapping[str, Any] | None = None
    ) -> ExecuteResult:
        """Run a write statement and report the affected row count.

        ``last_row_id`` is the id generated by an insert on this same
        statement, or None when the driver did not report one.
        """
        async with self._begin() as conn:
            result = await conn.execute(_coerce(statement), params)
            last_row_id = result.lastrowid if result.lastrowid else None
            return ExecuteResult(rowcount=result.rowcount, last_row_id=last_row_id)

    async def fetch_one(
        self, statement: Statement, params: Mapping[str, Any] | None = None
    ) -> Row | None:
        """Run a query and return its first row, or None if there is none."""
        async with self._begin() as conn:
            result = await conn.execute(_coerce(statement), params)
            row = result.mappings().first()
            return dict(row) if row is not None else None

    async def fetch_all(
        self, statement: Statement, params: Mapping[str, Any] | None = None
    ) -> list[Row]:
        """Run a query and return every row in the storage's scan order."""
        async with self._begin() as conn:
            result = await conn.execute(_coerce(statement), params)
            return [dict(row) for row in result.mappings().all()]

    async def create_schema(self) -> None:
        """Create the contacts table if it does not exist yet."""
        async with self._begin() as conn:
            await conn.run_sync(target_metadata.create_all, checkfirst=True)
        logger.info("Database schema ready", tables=sorted(target_metadata.tables))

    async def ping(self) -> bool:
        """Return True when the database answers a trivial query."""
        try:
            row = await self.fetch_one("SELECT 1 AS ok")
        except StorageError:
            return False
        return row is not None and row["ok"] == 1

    async def close(self) -> None:
        """Release every pooled connection."""
        await self._engine.dispose()
        logger.debug("Storage gateway closed")
