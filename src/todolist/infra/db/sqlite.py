from __future__ import annotations
from pathlib import Path

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine


def make_sqlite_url(db_path: str) -> str:
    """Turn DB_PATH into an aiosqlite URL, creating the parent directory.

    Anything that already looks like a URL is returned as is.
    """
    if "://" in db_path:
        return db_path
    p = Path(db_path).resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite+aiosqlite:///{p.as_posix()}"


def make_engine(url: str, echo: bool = False) -> AsyncEngine:
    return create_async_engine(url, echo=echo)


def make_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_tables(engine: AsyncEngine, metadata: MetaData) -> list[str]:
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    return sorted(metadata.tables)
