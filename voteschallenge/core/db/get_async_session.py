# Standard library imports
from collections.abc import AsyncGenerator

# Third-party imports
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Local application imports
from voteschallenge.core.db.create_async_engine import async_engine
from voteschallenge.core.monitoring.logging import get_logger

logger = get_logger(__name__)

# Objects stay readable after commit; services return them to the routes
AsyncSessionLocal = async_sessionmaker(bind=async_engine, class_=AsyncSession, expire_on_commit=False)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one session per request.

    A database error escaping the route rolls the session back before the
    error handlers turn it into a response.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except SQLAlchemyError:
            logger.error("Rolling back request session after a database error", exc_info=True)
            await session.rollback()
            raise
