"""Construct storage providers from plain option values."""
from __future__ import annotations
from pathlib import Path
from typing import Optional

from .base import EntityStorage
from .file_storage import DEFAULT_PREFIX, FileStorage
from .interfaces import EntityFactory
from .memory_storage import MemoryStorage
from .serializer import Serializer, get_serializer


def create_storage(
    backend: str = "file",
    serializer: str | Serializer = "pickle",
    data_dir: str | Path = "./data/storage",
    entity_type: Optional[EntityFactory] = None,
    prefix: str = DEFAULT_PREFIX,
) -> EntityStorage:
    """Create a storage provider.

    `serializer` is either a registered name (``pickle``, ``json``,
    ``yaml``) or a ready serializer instance.
    """
    ser = get_serializer(serializer) if isinstance(serializer, str) else serializer
    backend = backend.lower()
    if backend == "file":
        return FileStorage(data_dir, entity_type=entity_type, serializer=ser, prefix=prefix)
    if backend == "memory":
        return MemoryStorage(entity_type=entity_type, serializer=ser)
    raise ValueError(f"Unknown storage backend: {backend!r}")
