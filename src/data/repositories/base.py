"""
Base repository class providing read access to a MongoDB collection.

Entity repositories inherit from this base class. Driver errors and
malformed documents surface as UpstreamFailureError.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Generic, Iterator, Optional, TypeVar

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import ValidationError
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from src.core.exceptions import UpstreamFailureError
from src.data.database import DatabaseManager, get_database_manager
from src.data.models.base import BaseDocument
from src.utils.logger import get_logger

logger = get_logger(__name__)

# Type variable for document models
T = TypeVar("T", bound=BaseDocument)


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository providing common read operations.

    Implements both synchronous and asynchronous variants.
    Subclasses must define the collection name and model class.
    """

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Name of the MongoDB collection."""
        pass

    @property
    @abstractmethod
    def model_class(self) -> type[T]:
        """Pydantic model class for this repository."""
        pass

    def __init__(self, db_manager: Optional[DatabaseManager] = None) -> None:
        """Initialize repository with database connection."""
        self._db_manager = db_manager or get_database_manager()

    # -------------------------------------------------------------------------
    # Collection Access
    # -------------------------------------------------------------------------

    def _get_sync_collection(self) -> Collection:
        """Get synchronous collection instance."""
        return self._db_manager.get_sync_collection(self.collection_name)

    def _get_async_collection(self) -> AsyncIOMotorCollection:
        """Get asynchronous collection instance."""
        return self._db_manager.get_async_collection(self.collection_name)

    @contextmanager
    def _upstream(self, operation: str) -> Iterator[None]:
        """Re-raise driver errors as UpstreamFailureError."""
        try:
            yield
        except PyMongoError as e:
            logger.error(f"{self.collection_name}.{operation} failed: {e}")
            raise UpstreamFailureError(
                f"{self.collection_name}.{operation} failed: {e}"
            ) from e

    # -------------------------------------------------------------------------
    # Document Conversion
    # -------------------------------------------------------------------------

    def _to_model(self, document: Optional[dict[str, Any]]) -> Optional[T]:
        """Convert MongoDB document to Pydantic model."""
        if document is None:
            return None
        try:
            return self.model_class.model_validate(document)
        except ValidationError as e:
            raise UpstreamFailureError(
                f"Malformed {self.collection_name} document {document.get('_id')}: {e}"
            ) from e

    def _to_models(self, documents: list[dict[str, Any]]) -> list[T]:
        """Convert list of MongoDB documents to Pydantic models."""
        return [self._to_model(doc) for doc in documents if doc is not None]

    @staticmethod
    def _to_object_id(id_value: str | ObjectId) -> Optional[ObjectId]:
        """Convert string to ObjectId; None if it is not a valid id."""
        if isinstance(id_value, ObjectId):
            return id_value
        if isinstance(id_value, str) and ObjectId.is_valid(id_value):
            return ObjectId(id_value)
        return None

    # -------------------------------------------------------------------------
    # Synchronous Reads
    # -------------------------------------------------------------------------

    def get_by_id(self, id_value: str | ObjectId) -> Optional[T]:
        """Get a document by its ID."""
        object_id = self._to_object_id(id_value)
        if object_id is None:
            return None
        with self._upstream("find_one"):
            document = self._get_sync_collection().find_one({"_id": object_id})
        return self._to_model(document)

    def find(self, query: dict[str, Any], limit: int = 0) -> list[T]:
        """
        Find documents matching a query, in the order the server returns them.

        No sort is applied so that $near results stay nearest-first.
        """
        with self._upstream("find"):
            cursor = self._get_sync_collection().find(query)
            if limit:
                cursor = cursor.limit(limit)
            documents = list(cursor)
        logger.debug(f"{self.collection_name}.find returned {len(documents)} documents")
        return self._to_models(documents)

    # -------------------------------------------------------------------------
    # Asynchronous Reads
    # -------------------------------------------------------------------------

    async def get_by_id_async(self, id_value: str | ObjectId) -> Optional[T]:
        """Get a document by its ID asynchronously."""
        object_id = self._to_object_id(id_value)
        if object_id is None:
            return None
        with self._upstream("find_one"):
            document = await self._get_async_collection().find_one({"_id": object_id})
        return self._to_model(document)

    async def find_async(self, query: dict[str, Any], limit: int = 0) -> list[T]:
        """Find documents matching a query asynchronously."""
        with self._upstream("find"):
            cursor = self._get_async_collection().find(query)
            if limit:
                cursor = cursor.limit(limit)
            documents = await cursor.to_list(length=limit or None)
        logger.debug(f"{self.collection_name}.find returned {len(documents)} documents")
        return self._to_models(documents)
