# database.py
"""
Exercise Tracker MongoDB Database Connection.

Uses Motor async driver with Beanie ODM.
"""

from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class Database:
    """
    MongoDB connection handle.

    One instance is created per application and owned by its lifespan;
    nothing reaches it through module globals.

    Attributes:
        database_url: MongoDB connection string.
        database_name: Database holding the users and exercises collections.
        client: Motor async client, set by connect().
    """

    def __init__(
        self,
        database_url: str,
        database_name: str,
        client: Optional[AsyncIOMotorClient] = None
    ):
        self.database_url = database_url
        self.database_name = database_name
        self.client = client
        self.connected = False

    async def connect(self) -> None:
        """
        Create the Motor client and initialize Beanie with the document models.

        A client passed to the constructor is used as-is.
        """
        if self.connected:
            return

        try:
            if self.client is None:
                self.client = AsyncIOMotorClient(
                    self.database_url,
                    serverSelectionTimeoutMS=5000  # 5 second timeout
                )

            db = self.client[self.database_name]

            from app.models.mongodb import UserDocument, ExerciseDocument

            await init_beanie(
                database=db,
                document_models=[UserDocument, ExerciseDocument]
            )
            self.connected = True
            logger.info(f"Beanie ODM initialized on database: {self.database_name}")

        except Exception as e:
            logger.error(f"Error connecting to MongoDB: {e}")
            raise

    async def close(self) -> None:
        """Close MongoDB connection."""
        if self.client:
            self.client.close()
            self.connected = False
            logger.info("MongoDB connection closed")

    async def ping(self) -> bool:
        """Test MongoDB connection."""
        if not self.client:
            return False
        try:
            await self.client.admin.command('ping')
            return True
        except Exception as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False
