"""
Storage Package

Key-value storage backends and the factory that picks one from configuration.
"""

import logging

from ..exceptions import PersistenceUnavailable
from ..utils.game_logger import game_logger
from .base import BestEffortStorage, KeyValueStorage, MemoryStorage
from .file_storage import JsonFileStorage
from .mongo_storage import MongoStorage


def create_storage(config_class) -> KeyValueStorage:
    """
    Build the storage backend named by ``config_class.STORAGE_BACKEND``.
    
    A backend that cannot be reached at startup is replaced by MemoryStorage,
    so the game stays playable without durability.
    
    Args:
        config_class: Configuration class to read settings from
        
    Returns:
        KeyValueStorage instance
        
    Raises:
        ValueError: If the backend name is unknown
    """
    backend = getattr(config_class, 'STORAGE_BACKEND', 'file')
    
    if backend == 'memory':
        return MemoryStorage()
    if backend == 'file':
        return JsonFileStorage(config_class.STORAGE_PATH)
    if backend == 'mongo':
        try:
            return MongoStorage(config_class.MONGO_URI, config_class.MONGO_DATABASE)
        except PersistenceUnavailable as e:
            game_logger.log_game_event(
                None, 'storage_unavailable', level=logging.WARNING,
                operation='connect', backend=backend, error_message=str(e),
                fallback='memory'
            )
            return MemoryStorage()
    
    raise ValueError(f'Unknown storage backend "{backend}". Must be "file", "mongo" or "memory"')


__all__ = [
    'BestEffortStorage', 'KeyValueStorage', 'MemoryStorage',
    'JsonFileStorage', 'MongoStorage', 'create_storage'
]
