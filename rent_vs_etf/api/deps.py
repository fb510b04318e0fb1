"""FastAPI dependency injection."""

from collections.abc import AsyncIterator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from rent_vs_etf.config import settings
from rent_vs_etf.data.comparison_store import SQLComparisonStore

engine = create_async_engine(settings.database_url, echo=settings.debug)
async_session = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncIterator[AsyncSession]:
    async with async_session() as session:
        yield session


def get_store(session: AsyncSession = Depends(get_db)) -> SQLComparisonStore:
    return SQLComparisonStore(session)
