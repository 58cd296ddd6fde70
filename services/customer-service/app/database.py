"""MongoDB client lifecycle management."""

from typing import Optional

import structlog
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from .config import Settings

logger = structlog.get_logger(__name__)


class MongoManager:
    """
    Owns the MongoDB client for one application instance.

    Created by the application lifespan and handed to repositories through
    FastAPI dependencies; there is no module-level client.
    """

    def __init__(
        self,
        uri: str,
        db_name: str,
        server_selection_timeout_ms: int = 5000,
    ):
        self.uri = uri
        self.db_name = db_name
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self.client: Optional[AsyncMongoClient] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoManager":
        """Build a manager from service settings."""
        return cls(
            uri=settings.MONGO_URI,
            db_name=settings.MONGO_DB_NAME,
            server_selection_timeout_ms=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
        )

    async def connect(self) -> None:
        """Create the MongoDB client."""
        if self.client is None:
            logger.info("Creating MongoDB client", db_name=self.db_name)
            # tz_aware so createdAt comes back as an aware UTC datetime
            self.client = AsyncMongoClient(
                self.uri,
                tz_aware=True,
                serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            )
            logger.info("MongoDB client created")

    async def disconnect(self) -> None:
        """Close the MongoDB client."""
        if self.client is not None:
            logger.info("Closing MongoDB client")
            await self.client.close()
            self.client = None
            logger.info("MongoDB client closed")

    @property
    def database(self) -> AsyncDatabase:
        """
        Database handle for repositories.

        Raises:
            RuntimeError: If ``connect`` has not been called
        """
        if self.client is None:
            raise RuntimeError("MongoDB client not connected")
        return self.client[self.db_name]

    async def ping(self) -> bool:
        """Check that the server answers a ping."""
        try:
            await self.database.command("ping")
            return True
        except (PyMongoError, RuntimeError) as e:
            logger.warning("MongoDB ping failed", error=str(e))
            return False
