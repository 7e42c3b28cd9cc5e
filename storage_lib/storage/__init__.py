"""Entity storage providers."""

from .base import EntityStorage
from .errors import InvalidIdentifierError, SerializationError, StorageError, StorageIOError
from .factory import create_storage
from .file_storage import FileStorage
from .identifier import canonicalize, storage_key
from .memory_storage import MemoryStorage
from .serializer import JSONSerializer, PickleSerializer, YAMLSerializer, get_serializer

__all__ = [
    "EntityStorage",
    "FileStorage",
    "MemoryStorage",
    "create_storage",
    "canonicalize",
    "storage_key",
    "PickleSerializer",
    "JSONSerializer",
    "YAMLSerializer",
    "get_serializer",
    "StorageError",
    "StorageIOError",
    "SerializationError",
    "InvalidIdentifierError",
]
