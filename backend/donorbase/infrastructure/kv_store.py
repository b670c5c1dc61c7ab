"""SQL Key-Value Store - KeyValueStore implementation over the records table.

Invariants:
    - Every operation is scoped to one namespace (disjoint key spaces)
    - insert() is an upsert committed immediately: last write wins
    - Returned dicts are deep copies, never the identity-mapped JSON objects
    - values() enumerates in key order
    - SQLAlchemy failures roll back and surface as DatabaseError
"""

import copy
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from donorbase.core.domain_types import Namespace
from donorbase.core.errors import DatabaseError, ErrorContext
from donorbase.models.record import StoredRecord

logger = logging.getLogger(__name__)


class SqlKeyValueStore:
    """Namespace-scoped key-value access through an AsyncSession."""

    def __init__(self, session: AsyncSession, namespace: Namespace):
        self._session = session
        self._namespace = namespace

    async def get(self, key: str) -> dict | None:
        async with self._guard("get", key):
            row = await self._session.get(StoredRecord, (self._namespace.value, key))
        return copy.deepcopy(row.value) if row else None

    async def insert(self, key: str, value: dict) -> None:
        async with self._guard("insert", key):
            await self._session.merge(StoredRecord(
                namespace=self._namespace.value, key=key, value=copy.deepcopy(value),
            ))
            await self._session.commit()

    async def remove(self, key: str) -> dict | None:
        async with self._guard("remove", key):
            row = await self._session.get(StoredRecord, (self._namespace.value, key))
            if row is None:
                return None
            value = copy.deepcopy(row.value)
            await self._session.delete(row)
            await self._session.commit()
        return value

    async def values(self) -> list[dict]:
        async with self._guard("values"):
            result = await self._session.execute(
                select(StoredRecord.value)
                .where(StoredRecord.namespace == self._namespace.value)
                .order_by(StoredRecord.key),
            )
            rows = result.scalars().all()
        return [copy.deepcopy(v) for v in rows]

    @asynccontextmanager
    async def _guard(self, operation: str, key: str | None = None) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(
                f"Store {operation} failed in {self._namespace.value}: {e}",
                extra={"operation": operation, "record_id": key},
            )
            raise DatabaseError(
                "Key-value store operation failed", operation,
                ErrorContext(record_id=key),
            ) from e
