import logging
from typing import Any

from sqlalchemy import column, select, table, text
from sqlalchemy.ext.asyncio import AsyncEngine

from getres_lens.config import DEFAULT_TABLE
from getres_lens.models import Resource

logger = logging.getLogger(__name__)


def _row_to_resource(row: Any) -> Resource:
    return Resource(id=row.id, pid=row.pid, name=str(row.name), code=row.code or "")


class SqlResourceSource:
    """Reads the flat resource table (``id``, ``pid``, ``name``, ``code``) through an async engine."""

    def __init__(self, engine: AsyncEngine, table_name: str = DEFAULT_TABLE) -> None:
        self._engine = engine
        self._table_name = table_name

    def _select(self) -> Any:
        resources = table(self._table_name, column("id"), column("pid"), column("name"), column("code"))
        return select(resources.c.id, resources.c.pid, resources.c.name, resources.c.code)

    async def fetch_resources(self) -> list[Resource]:
        async with self._engine.connect() as conn:
            result = await conn.execute(self._select())
            rows = result.fetchall()
        logger.debug("Fetched %d rows from %s", len(rows), self._table_name)
        return [_row_to_resource(row) for row in rows]

    async def ping(self) -> bool:
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception:
            return False

    async def dispose(self) -> None:
        await self._engine.dispose()
