import os
import logging
import asyncpg
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Read-only connection pool, created on first use
_pool = None


async def get_pool(database_url: str | None = None):
    """Get or create the connection pool. Falls back to DATABASE_URL from the environment."""
    global _pool
    if _pool is None:
        dsn = database_url or os.getenv('DATABASE_URL')
        if not dsn:
            raise RuntimeError("DATABASE_URL is not set")
        # One sequential export never needs more than a single connection
        _pool = await asyncpg.create_pool(
            dsn,
            min_size=1,
            max_size=1,
            command_timeout=30.0,
        )
    return _pool


async def close_pool():
    """Close the connection pool on shutdown."""
    global _pool
    if _pool is not None:
        try:
            await _pool.close()
        except Exception as e:
            logger.error(f"Error closing connection pool: {e}")
        finally:
            _pool = None
