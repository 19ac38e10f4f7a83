"""PostgreSQL async connection pool."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool


def create_pool(conninfo: str, min_size: int = 1, max_size: int = 4) -> AsyncConnectionPool:
    """Create async connection pool.

    Pool is created with open=False. Caller must open it before use, e.g.
    with ``pool_lifespan`` around the host's request handling.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        open=False,
    )


@asynccontextmanager
async def pool_lifespan(pool: AsyncConnectionPool) -> AsyncIterator[AsyncConnectionPool]:
    """Open pool on enter, close it on exit."""
    await pool.open()
    try:
        yield pool
    finally:
        await pool.close()
