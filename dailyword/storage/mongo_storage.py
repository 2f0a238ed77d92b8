"""
MongoDB Storage

One document per key in a ``kv_store`` collection: ``{"_id": key, "value": str}``.
"""

from typing import Optional

from pymongo.errors import PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..exceptions import PersistenceUnavailable
from .base import KeyValueStorage


class MongoStorage(KeyValueStorage):
    """Key-value storage backed by a MongoDB collection."""

    def __init__(self, mongo_uri: Optional[str] = None, database: str = "wordle_game", collection=None):
        """
        Initialize the storage with a MongoDB connection.
        
        Args:
            mongo_uri: MongoDB connection string
            database: Database name
            collection: Pre-built collection, bypasses the connection (used by tests)
        """
        if collection is not None:
            self.client = None
            self.collection = collection
            return
        
        if not mongo_uri:
            raise PersistenceUnavailable("MONGO_URI is not configured")
        
        try:
            self.client = MongoClient(mongo_uri, server_api=ServerApi('1'))
            self.collection = self.client[database].kv_store
            self.client.admin.command('ping')
        except PyMongoError as e:
            raise PersistenceUnavailable(f"MongoDB connection error: {e}") from e

    def get(self, key: str) -> Optional[str]:
        try:
            doc = self.collection.find_one({"_id": key})
        except PyMongoError as e:
            raise PersistenceUnavailable(str(e)) from e
        if not doc:
            return None
        value = doc.get("value")
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            self.collection.update_one({"_id": key}, {"$set": {"value": value}}, upsert=True)
        except PyMongoError as e:
            raise PersistenceUnavailable(str(e)) from e

    def remove(self, key: str) -> None:
        try:
            self.collection.delete_one({"_id": key})
        except PyMongoError as e:
            raise PersistenceUnavailable(str(e)) from e
