"""
MongoDB connections for the Labour Chowk matching engine.

The profiles and jobs collections belong to the marketplace web application;
this engine only reads them. One PyMongo client serves the synchronous
operations and one Motor client the *_async ones.
"""

from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import GEOSPHERE, MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from src.data.models import Job, WorkerProfile
from src.utils.config import get_settings
from src.utils.logger import get_logger

logger = get_logger(__name__)


class DatabaseManager:
    """
    Process-wide holder of the MongoDB clients.

    Clients are created on first use and shared by every repository.
    """

    _instance: Optional["DatabaseManager"] = None
    _sync_client: Optional[MongoClient] = None
    _async_client: Optional[AsyncIOMotorClient] = None

    def __new__(cls) -> "DatabaseManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if getattr(self, "_initialized", False):
            return

        self._settings = get_settings()
        self._db_name = self._settings.database.name
        self._initialized = True

    def _client_kwargs(self) -> dict[str, Any]:
        """Pool and timeout options shared by both clients."""
        db_settings = self._settings.database
        return {
            "serverSelectionTimeoutMS": db_settings.server_selection_timeout_ms,
            "connectTimeoutMS": db_settings.server_selection_timeout_ms,
            "maxPoolSize": db_settings.max_pool_size,
            "minPoolSize": db_settings.min_pool_size,
        }

    # -------------------------------------------------------------------------
    # PyMongo
    # -------------------------------------------------------------------------

    def get_sync_client(self) -> MongoClient:
        if self._sync_client is None:
            db_settings = self._settings.database
            logger.info(f"Connecting to MongoDB at {db_settings.host}:{db_settings.port}")
            self._sync_client = MongoClient(db_settings.uri, **self._client_kwargs())
        return self._sync_client

    def get_sync_database(self) -> Database:
        return self.get_sync_client()[self._db_name]

    def get_sync_collection(self, collection_name: str) -> Any:
        return self.get_sync_database()[collection_name]

    def check_sync_connection(self) -> bool:
        """Ping the server; a failed ping closes the client so the next call reconnects."""
        try:
            self.get_sync_client().admin.command("ping")
            return True
        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"MongoDB ping failed: {e}")
            if self._sync_client is not None:
                self._sync_client.close()
                self._sync_client = None
            return False

    # -------------------------------------------------------------------------
    # Motor
    # -------------------------------------------------------------------------

    def get_async_client(self) -> AsyncIOMotorClient:
        if self._async_client is None:
            logger.info("Creating Motor client")
            self._async_client = AsyncIOMotorClient(
                self._settings.database.uri, **self._client_kwargs()
            )
        return self._async_client

    def get_async_database(self) -> AsyncIOMotorDatabase:
        return self.get_async_client()[self._db_name]

    def get_async_collection(self, collection_name: str) -> Any:
        return self.get_async_database()[collection_name]

    async def check_async_connection(self) -> bool:
        try:
            await self.get_async_client().admin.command("ping")
            return True
        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"MongoDB ping failed (async): {e}")
            return False

    def close(self) -> None:
        """Close whichever clients have been opened."""
        for attr in ("_sync_client", "_async_client"):
            client = getattr(self, attr)
            if client is not None:
                client.close()
                setattr(self, attr, None)
        logger.info("MongoDB clients closed")

    # -------------------------------------------------------------------------
    # Indexes
    # -------------------------------------------------------------------------

    def ensure_indexes(self) -> None:
        """
        Create the indexes the matching queries rely on.

        $near requires a 2dsphere index on the queried location field; the
        remaining single-field indexes are those the web application declares.
        Creating an index that already exists is a no-op.
        """
        db_settings = self._settings.database

        for collection_name, model in (
            (db_settings.profiles_collection, WorkerProfile),
            (db_settings.jobs_collection, Job),
        ):
            collection = self.get_sync_collection(collection_name)
            for field in model.Settings.geo_indexes:
                collection.create_index([(field, GEOSPHERE)])
            for field in model.Settings.indexes:
                collection.create_index(field)
            logger.info(
                f"Indexes ensured on {collection_name}: "
                f"{len(model.Settings.geo_indexes)} geo, {len(model.Settings.indexes)} field"
            )


_db_manager: Optional[DatabaseManager] = None


def get_database_manager() -> DatabaseManager:
    """Get the global database manager instance."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


def get_sync_db() -> Database:
    return get_database_manager().get_sync_database()


def get_async_db() -> AsyncIOMotorDatabase:
    return get_database_manager().get_async_database()
