"""
Database context for notes.

Wraps the Motor client, the configured database and the notes collection so
repositories never build connections themselves.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from core.constants import NOTES_COLLECTION_NAME
from core.settings import Settings

logger = logging.getLogger(__name__)


class NoteContext:
    """
    Access point to the notes collection.

    The client is created lazily from the settings unless one is supplied,
    which lets tests hand in an in-process mock client.
    """

    def __init__(self, settings: Settings, client: Optional[AsyncIOMotorClient] = None):
        """
        Initialize the context.

        Args:
            settings: Connection string and database name
            client: Optional pre-built client to use instead of connecting
        """
        self.settings = settings
        self._client = client

    @property
    def client(self) -> AsyncIOMotorClient:
        if self._client is None:
            logger.info(f"Connecting to MongoDB database '{self.settings.database}'")
            self._client = AsyncIOMotorClient(
                self.settings.connection_string,
                serverSelectionTimeoutMS=self.settings.server_selection_timeout_ms,
            )
        return self._client

    @property
    def database(self):
        return self.client[self.settings.database]

    @property
    def notes(self) -> AsyncIOMotorCollection:
        """The collection holding note documents."""
        return self.database[NOTES_COLLECTION_NAME]

    async def ping(self) -> bool:
        """Check whether the database server answers."""
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    def close(self) -> None:
        """Close the client if one was opened."""
        if self._client is not None:
            self._client.close()
            self._client = None
