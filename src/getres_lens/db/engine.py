from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from getres_lens.config import DEFAULT_DATABASE_URL


def get_engine(db_url: str = DEFAULT_DATABASE_URL) -> AsyncEngine:
    return create_async_engine(db_url, future=True, pool_pre_ping=True)
