"""Task lists mirrored into PostgreSQL.

Expected schema:

    reminder_lists (list_id, name, position)
    reminders (reminder_id, list_id, position, title, notes, due_date, creation_date,
               completion_date, completed, priority, flagged)

Each attribute is read with its own SELECT over the whole list, so a
missing or unreadable column only blanks that column.
"""

import logging

import asyncpg

from reminders_export.errors import AttributeFetchFailure, ListNotFound
from reminders_export.services.database import close_pool, get_pool
from reminders_export.sources.base import ATTRIBUTES, AttributeName, ListHandle, RecordSource

logger = logging.getLogger(__name__)

# Column names are fixed; attribute names never reach SQL unchecked
ATTRIBUTE_COLUMNS = {attribute: attribute for attribute in ATTRIBUTES}


class PostgresRecordSource(RecordSource):
    """RecordSource backed by an asyncpg connection pool."""

    def __init__(self, database_url: str | None = None):
        self.database_url = database_url

    async def _pool(self):
        return await get_pool(self.database_url)

    async def list_all(self) -> list[ListHandle]:
        pool = await self._pool()
        async with pool.acquire() as conn:
            rows = await conn.fetch("SELECT list_id, name FROM reminder_lists ORDER BY position, list_id")
        return [ListHandle(name=row['name'], ref=row['list_id']) for row in rows]

    async def find_list(self, name: str) -> ListHandle:
        pool = await self._pool()
        async with pool.acquire() as conn:
            row = await conn.fetchrow(
                "SELECT list_id, name FROM reminder_lists WHERE name = $1 ORDER BY position, list_id LIMIT 1",
                name
            )
        if row is None:
            raise ListNotFound(name)
        return ListHandle(name=row['name'], ref=row['list_id'])

    async def count(self, handle: ListHandle) -> int:
        pool = await self._pool()
        async with pool.acquire() as conn:
            return await conn.fetchval("SELECT count(*) FROM reminders WHERE list_id = $1", handle.ref)

    async def fetch_attribute(self, handle: ListHandle, attribute: AttributeName) -> list:
        column = ATTRIBUTE_COLUMNS[attribute]
        pool = await self._pool()
        try:
            async with pool.acquire() as conn:
                rows = await conn.fetch(
                    f"SELECT {column} FROM reminders WHERE list_id = $1 ORDER BY position, reminder_id",
                    handle.ref
                )
        except asyncpg.PostgresError as e:
            raise AttributeFetchFailure(handle.name, attribute, str(e)) from e
        return [row[0] for row in rows]

    async def close(self) -> None:
        await close_pool()
