"""Entity storage interface definitions.

Defines the EntityStorage abstract class implemented by the storage
providers. Providers map an identifier to a storage key (see
`storage_lib.storage.identifier`) and persist one serialized entity per key.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
import logging
from typing import Any, Iterable, List, Optional

from .identifier import Identifier
from .interfaces import EntityFactory
from .serializer import PickleSerializer, Serializer

logger = logging.getLogger(__name__)


class EntityStorage(ABC):
    """Abstract keyed entity store.

    `entity_type` is an optional zero-argument factory (usually the entity
    class) used by `create` and `find_or_create`. Without it the provider
    still stores and loads entities but cannot fabricate new ones.
    """

    def __init__(
        self,
        entity_type: Optional[EntityFactory] = None,
        serializer: Optional[Serializer] = None,
    ) -> None:
        self.entity_type = entity_type
        self.serializer = serializer or PickleSerializer()

    def supports_create(self) -> bool:
        return self.entity_type is not None

    def create(self) -> Optional[Any]:
        """Return a new blank entity, or None when no entity type is bound.

        The instance is not persisted.
        """
        if self.entity_type is None:
            return None
        return self.entity_type()

    def find_or_create(self, identifier: Identifier) -> Optional[Any]:
        """Return the stored entity or a new blank one.

        A created entity is not persisted; call `flush` to store it.
        """
        entity = self.find(identifier)
        if entity is None:
            logger.debug("No entry for %r, creating a new entity", identifier)
            return self.create()
        return entity

    def find_multiple(self, identifiers: Iterable[Identifier]) -> List[Any]:
        """Return stored entities for `identifiers` in input order, skipping misses."""
        found = []
        for identifier in identifiers:
            entity = self.find(identifier)
            if entity is not None:
                found.append(entity)
        return found

    def __contains__(self, identifier: Identifier) -> bool:
        return self.has(identifier)

    @abstractmethod
    def find(self, identifier: Identifier) -> Optional[Any]:
        """Return the entity stored under `identifier`, or None if absent.

        Must raise `SerializationError` for entries that cannot be decoded.
        """

    @abstractmethod
    def has(self, identifier: Identifier) -> bool:
        """Return True if an entry exists for `identifier` without decoding it."""

    @abstractmethod
    def find_all(self) -> List[Any]:
        """Return every stored entity. Fails on the first undecodable entry."""

    @abstractmethod
    def flush(self, identifier: Identifier, entity: Any) -> bool:
        """Create or overwrite the entry for `identifier`."""

    @abstractmethod
    def remove(self, identifier: Identifier, entity: Any = None) -> bool:
        """Ensure no entry exists for `identifier`. Missing entries are not an error."""

    @abstractmethod
    def remove_all(self) -> bool:
        """Delete every entry owned by this provider."""

    @abstractmethod
    def keys(self) -> List[str]:
        """Return the storage keys of all existing entries."""

    def __len__(self) -> int:
        return len(self.keys())
