"""
MongoDB Database Handler for the Bookstore Query Runner
"""

import motor.motor_asyncio
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import ConnectionFailure

from config import (
    MONGODB_URI, MONGODB_DB_NAME, MONGODB_COLLECTION,
    MONGODB_CONNECT_TIMEOUT_MS, MONGODB_SERVER_SELECTION_TIMEOUT_MS
)
from core.utils import get_logger

logger = get_logger(__name__)


class MongoDB:
    """MongoDB connection manager for the bookstore database"""

    def __init__(self, uri: str = MONGODB_URI, db_name: str = MONGODB_DB_NAME,
                 collection_name: str = MONGODB_COLLECTION):
        self.uri = uri
        self.db_name = db_name
        self.collection_name = collection_name
        self.client = None
        self.db = None
        self.is_connected = False

    async def connect(self):
        """Establish connection to MongoDB"""
        try:
            self.client = motor.motor_asyncio.AsyncIOMotorClient(
                self.uri,
                connectTimeoutMS=MONGODB_CONNECT_TIMEOUT_MS,
                serverSelectionTimeoutMS=MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            )

            # Test connection
            await self.client.admin.command('ping')

            self.db = self.client[self.db_name]
            self.is_connected = True
            logger.info(f"✅ Connected to MongoDB: {self.db_name}.{self.collection_name}")

        except ConnectionFailure as e:
            logger.error(f"❌ MongoDB connection failed: {e}")
            await self.disconnect()
            raise
        except Exception as e:
            logger.error(f"❌ MongoDB error: {e}")
            await self.disconnect()
            raise

    async def disconnect(self):
        """Close database connection"""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            self.is_connected = False
            logger.info("🔌 Disconnected from MongoDB")

    @property
    def books(self) -> AsyncIOMotorCollection:
        """The books collection"""
        if self.db is None:
            raise RuntimeError("MongoDB is not connected; call connect() first")
        return self.db[self.collection_name]

    async def __aenter__(self) -> 'MongoDB':
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()


# Global MongoDB instance
db = MongoDB()
