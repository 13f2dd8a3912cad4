import logging
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from shop_admin.config import Config

logger = logging.getLogger(__name__)

engine_options = {"echo": Config.SQL_ECHO, "future": True}

# sqlite (used in tests and local runs) rejects queue pool sizing
if not Config.DATABASE_URL.startswith("sqlite"):
    engine_options.update(pool_size=10, max_overflow=20, pool_timeout=60)

async_engine = create_async_engine(Config.DATABASE_URL, **engine_options)

Session = sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def init_db() -> None:
    # models must be imported so their tables are registered on the metadata
    from shop_admin.db import models  # noqa: F401

    async with async_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database schema is ready")


async def close_db() -> None:
    await async_engine.dispose()
    logger.info("Database engine disposed")


async def get_session() -> AsyncSession: # type: ignore
    async with Session() as session:
        try:
            yield session
        except Exception as e:
            logger.error(f"Session error: {e}")
            await session.rollback()
            raise
