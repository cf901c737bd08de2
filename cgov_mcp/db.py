"""Database connection module using Prisma with automatic reconnection.

The pool is an explicit object owned by the entry point and handed to the
handlers; there is no module-level client.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from prisma import Prisma

    from .config import Settings

logger = logging.getLogger(__name__)


def _default_client_factory(database_url: str) -> "Prisma":
    # Imported lazily: the generated client only exists after `prisma generate`
    from prisma import Prisma

    return Prisma(datasource={"url": database_url})


class DatabasePool:
    """Lazily connected, read-only access to PostgreSQL.

    Every query runs in its own interactive transaction that is switched to
    READ ONLY before the statement executes.
    """

    def __init__(
        self,
        database_url: str,
        max_retries: int = 3,
        retry_delay_seconds: float = 1.0,
        client_factory: Callable[[str], Any] = _default_client_factory,
    ):
        self.database_url = database_url
        self.max_retries = max_retries
        self.retry_delay_seconds = retry_delay_seconds
        self._client_factory = client_factory
        self._client: Any = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "DatabasePool":
        return cls(
            settings.resolved_database_url,
            max_retries=settings.db_max_retries,
            retry_delay_seconds=settings.db_retry_delay_seconds,
        )

    @property
    def connected(self) -> bool:
        return self._client is not None

    async def _create_client(self) -> Any:
        """Create and connect a new Prisma client with retry logic."""
        for attempt in range(self.max_retries):
            try:
                client = self._client_factory(self.database_url)
                await client.connect()
                logger.info("Database connection established")
                return client
            except Exception as e:
                if attempt < self.max_retries - 1:
                    delay = self.retry_delay_seconds * (2**attempt)  # Exponential backoff
                    logger.warning(
                        f"Database connection attempt {attempt + 1} failed: {e}. "
                        f"Retrying in {delay}s..."
                    )
                    await asyncio.sleep(delay)
                else:
                    logger.error(
                        f"Failed to connect to database after {self.max_retries} attempts: {e}"
                    )
                    raise

    async def connect(self) -> Any:
        """Get or create the connected client."""
        async with self._lock:
            if self._client is None:
                self._client = await self._create_client()
            return self._client

    async def query(self, sql: str, *params: Any) -> list[dict[str, Any]]:
        """Run one statement in a READ ONLY transaction and return its rows.

        Args:
            sql: Statement text, with $1, $2, ... placeholders
            *params: Positional parameter values
        """
        client = await self.connect()
        async with client.tx() as tx:
            await tx.execute_raw("SET TRANSACTION READ ONLY")
            return await tx.query_raw(sql, *params)

    async def close(self) -> None:
        """Close the database connection. Safe to call more than once."""
        async with self._lock:
            if self._client is None:
                return
            try:
                await self._client.disconnect()
                logger.info("Database connection closed")
            except Exception as e:
                logger.warning(f"Error closing database connection: {e}")
            finally:
                self._client = None
