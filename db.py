from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any
import logging

from sqlalchemy import event, Result, CursorResult
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import Session

import config
"""
Imports of these models are needed to correctly create tables in the database.
For more information see https://stackoverflow.com/questions/7478403/sqlalchemy-classes-across-files
"""
from models import Base

logger = logging.getLogger(__name__)

url = make_url(config.DB_URL)

# SQLite file databases live under a relative folder (data/shop.db by default)
if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)

engine = create_async_engine(url, echo=False)
session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


if engine.dialect.name == "sqlite":
    event.listen(engine.sync_engine, "connect", set_sqlite_pragma)


@asynccontextmanager
async def get_db_session() -> AsyncSession:
    session = None
    try:
        async with session_maker() as async_session:
            session = async_session
            yield session
    finally:
        if session is not None:
            await session.close()


async def session_execute(stmt, session: AsyncSession | Session) -> Result[Any] | CursorResult[Any]:
    if isinstance(session, AsyncSession):
        query_result = await session.execute(stmt)
        return query_result
    else:
        query_result = session.execute(stmt)
        return query_result


async def session_flush(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.flush()
    else:
        session.flush()


async def session_commit(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.commit()
    else:
        session.commit()


async def session_rollback(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.rollback()
    else:
        session.rollback()


async def create_db_and_tables():
    # create_all skips tables that already exist
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"Database ready ({engine.dialect.name}, {len(Base.metadata.tables)} tables)")
