"""Memory-backed entity storage.

Entries live in a dict keyed by storage key and hold serialized bytes, so
callers always receive a fresh copy exactly like the file provider.
"""
from threading import RLock
from typing import Any, Dict, List, Optional, Tuple

from .base import EntityStorage
from .errors import SerializationError
from .identifier import Identifier, storage_key
from .interfaces import EntityFactory
from .serializer import Serializer


class MemoryStorage(EntityStorage):
    def __init__(
        self,
        entity_type: Optional[EntityFactory] = None,
        serializer: Optional[Serializer] = None,
    ) -> None:
        super().__init__(entity_type=entity_type, serializer=serializer)
        self._lock = RLock()
        self._store: Dict[str, bytes] = {}

    def _decode(self, key: str, data: bytes) -> Any:
        try:
            return self.serializer.load(data)
        except Exception as e:
            raise SerializationError(f"Failed to decode entry {key}: {e}") from e

    def find(self, identifier: Identifier) -> Optional[Any]:
        key = storage_key(identifier)
        with self._lock:
            data = self._store.get(key)
        if data is None:
            return None
        return self._decode(key, data)

    def has(self, identifier: Identifier) -> bool:
        with self._lock:
            return storage_key(identifier) in self._store

    def items(self) -> List[Tuple[str, Any]]:
        with self._lock:
            stored = list(self._store.items())
        return [(key, self._decode(key, data)) for key, data in stored]

    def find_all(self) -> List[Any]:
        return [entity for _, entity in self.items()]

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._store.keys())

    def flush(self, identifier: Identifier, entity: Any) -> bool:
        try:
            payload = self.serializer.dump(entity)
        except Exception as e:
            raise SerializationError(f"Failed to encode entity for {identifier!r}: {e}") from e
        with self._lock:
            self._store[storage_key(identifier)] = payload
        return True

    def remove(self, identifier: Identifier, entity: Any = None) -> bool:
        with self._lock:
            self._store.pop(storage_key(identifier), None)
        return True

    def remove_all(self) -> bool:
        with self._lock:
            self._store.clear()
        return True
