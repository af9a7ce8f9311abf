"""
Pre-start script: wait until the voting database accepts connections.
"""

# Standard library imports
import asyncio
import sys

# Third-party imports
import asyncpg
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# Local application imports
from voteschallenge.core.db.create_async_engine import create_async_engine
from voteschallenge.core.monitoring.logging import get_logger
from voteschallenge.settings import settings

logger = get_logger(__name__)


async def check_database(url: str | None = None) -> bool:
    """Check if the database is accessible and ready."""
    url = url or settings.SQLALCHEMY_ASYNC_DATABASE_URI
    try:
        if url.startswith("postgresql"):
            # asyncpg takes the plain libpq scheme
            conn = await asyncpg.connect(url.replace("postgresql+asyncpg://", "postgresql://", 1))
            await conn.close()
            logger.info("Database connection successful using asyncpg")

        engine = create_async_engine(url)
        try:
            async with engine.begin() as conn:
                await conn.execute(text("SELECT 1"))
        finally:
            await engine.dispose()

        logger.info("Database is ready")
        return True

    except (OSError, asyncpg.PostgresError, SQLAlchemyError) as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def wait_for_database(url: str | None = None, max_retries: int = 30, retry_interval: float = 2) -> bool:
    """
    Wait for the database to be ready.

    Args:
        url: Database URL, the configured one by default
        max_retries: Maximum number of connection attempts
        retry_interval: Seconds between retries

    Returns:
        True if the database is ready, False otherwise
    """
    logger.info("Waiting for database to be ready...")

    for attempt in range(1, max_retries + 1):
        logger.info(f"Database connection attempt {attempt}/{max_retries}")

        if await check_database(url):
            return True

        if attempt < max_retries:
            logger.info(f"Retrying in {retry_interval} seconds...")
            await asyncio.sleep(retry_interval)

    logger.error(f"Failed to connect to database after {max_retries} attempts")
    return False


async def main() -> None:
    logger.info("Starting pre-start checks...")

    if not await wait_for_database():
        logger.error("Pre-start checks failed: Database is not available")
        sys.exit(1)

    logger.info("All pre-start checks passed")


if __name__ == "__main__":
    asyncio.run(main())
