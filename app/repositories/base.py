"""
Base repository with the shared MongoDB connection.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure
from typing import Optional
import logging

from app.config.settings import get_settings

logger = logging.getLogger(__name__)


class BaseRepository:
    """Owns the MongoDB client and hands out database handles.

    The connection is established lazily. ``get_database`` returns ``None``
    while the server cannot be reached so callers can choose between a
    degraded read and a rejected write; it is retried on the next call.
    """

    def __init__(self, settings=None):
        self.settings = settings or get_settings()
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> None:
        """Establish connection to MongoDB."""
        try:
            self.client = AsyncIOMotorClient(
                self.settings.mongodb_uri,
                serverSelectionTimeoutMS=self.settings.mongodb_timeout_ms,
                tz_aware=True,
            )
            self.db = self.client[self.settings.mongodb_database]
            await self.client.admin.command('ping')
            logger.info(f"Connected to MongoDB: {self.settings.mongodb_database}")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            await self.disconnect()
            raise

    async def get_database(self) -> Optional[AsyncIOMotorDatabase]:
        """Return a live database handle, or ``None`` if MongoDB is unreachable.

        Errors other than connectivity failures (bad URI, auth) propagate.
        """
        if self.is_connected:
            return self.db
        try:
            await self.connect()
        except ConnectionFailure:
            return None
        return self.db

    async def disconnect(self) -> None:
        """Close MongoDB connection."""
        if self.client:
            self.client.close()
            logger.info("Disconnected from MongoDB")
        self.client = None
        self.db = None

    @property
    def is_connected(self) -> bool:
        """Check if connected to MongoDB."""
        return self.client is not None and self.db is not None
