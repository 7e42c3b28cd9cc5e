from typing import Protocol, Any, Iterable, List, Optional, runtime_checkable

from .identifier import Identifier


@runtime_checkable
class EntityFactory(Protocol):
    """Zero-argument callable producing a blank entity.

    An entity class or any plain factory function satisfies this protocol.
    """

    def __call__(self) -> Any: ...


@runtime_checkable
class StorageProtocol(Protocol):
    """Storage provider protocol mirroring `storage_lib.storage.EntityStorage`.

    Implementations should follow the semantics documented on the abstract
    base class in `storage_lib.storage.base` (None for missing entries,
    idempotent removal, upsert on flush).
    """

    def create(self) -> Optional[Any]: ...

    def find(self, identifier: Identifier) -> Optional[Any]: ...

    def find_or_create(self, identifier: Identifier) -> Optional[Any]: ...

    def find_multiple(self, identifiers: Iterable[Identifier]) -> List[Any]: ...

    def has(self, identifier: Identifier) -> bool: ...

    def find_all(self) -> List[Any]: ...

    def flush(self, identifier: Identifier, entity: Any) -> bool: ...

    def remove(self, identifier: Identifier, entity: Any = None) -> bool: ...

    def remove_all(self) -> bool: ...
