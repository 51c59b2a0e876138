# clean_api/adapters/outbound/persistence/database.py

"""
Async SQLAlchemy engine, session factory and the per-request session dependency.
"""

import logging
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from clean_api.adapters.configuration.config import settings

logger = logging.getLogger(__name__)

engine = create_async_engine(
    str(settings.DATABASE_URL),
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get a database session."""
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def check_db_connection(session: AsyncSession) -> bool:
    """Run a trivial query to check the database is reachable."""
    try:
        await session.execute(text("SELECT 1"))
        return True
    except (OSError, ConnectionError) as e:
        logger.warning(f"Database connection check failed: {e}")
        return False
    except Exception as e:
        logger.error(f"Unexpected error checking database connection: {e}")
        return False
