"""File-backed entity storage.

Each entity is stored in its own file at
`<storage_dir>/<prefix>-<storage_key>`, where the storage key is derived
from the identifier (see `storage_lib.storage.identifier`). Writes go to a
hidden temporary file in the same directory which is then renamed over the
entry, so readers never observe a partially written entry.
"""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, List, Optional, Tuple

from .base import EntityStorage
from .errors import SerializationError, StorageIOError
from .identifier import Identifier, storage_key
from .interfaces import EntityFactory
from .serializer import Serializer

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "storage-model"


class FileStorage(EntityStorage):
    """Store one serialized entity per file under `storage_dir`.

    The directory is created on the first write if it does not exist. Only
    files named with `prefix` are treated as entries, so the directory may
    be shared with unrelated files.
    """

    def __init__(
        self,
        storage_dir: str | Path,
        entity_type: Optional[EntityFactory] = None,
        serializer: Optional[Serializer] = None,
        prefix: str = DEFAULT_PREFIX,
    ) -> None:
        super().__init__(entity_type=entity_type, serializer=serializer)
        if not prefix or os.sep in prefix or "/" in prefix:
            raise ValueError(f"Invalid entry prefix: {prefix!r}")
        self.storage_dir = Path(storage_dir)
        self.prefix = prefix

    def _path_for(self, key: str) -> Path:
        return self.storage_dir / f"{self.prefix}-{key}"

    def path_for(self, identifier: Identifier) -> Path:
        """Return the entry path for `identifier` (no I/O)."""
        return self._path_for(storage_key(identifier))

    def _entry_paths(self) -> List[Path]:
        marker = f"{self.prefix}-"
        try:
            children = sorted(self.storage_dir.iterdir())
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageIOError(f"Failed to list {self.storage_dir}: {e}") from e
        return [p for p in children if p.name.startswith(marker) and p.is_file()]

    def _decode(self, path: Path, data: bytes) -> Any:
        try:
            return self.serializer.load(data)
        except Exception as e:
            raise SerializationError(f"Failed to decode entry {path.name}: {e}") from e

    def _read(self, path: Path) -> Optional[Any]:
        try:
            with open(path, "rb") as f:
                data = f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageIOError(f"Failed to read {path}: {e}") from e
        logger.debug("FileStorage loaded %s (%d bytes)", path, len(data))
        return self._decode(path, data)

    def find(self, identifier: Identifier) -> Optional[Any]:
        return self._read(self.path_for(identifier))

    def has(self, identifier: Identifier) -> bool:
        return self.path_for(identifier).is_file()

    def items(self) -> List[Tuple[str, Any]]:
        """Return `(storage_key, entity)` pairs from a single directory scan."""
        offset = len(self.prefix) + 1
        pairs = []
        for path in self._entry_paths():
            entity = self._read(path)
            # Entry removed between listing and reading.
            if entity is None and not path.exists():
                continue
            pairs.append((path.name[offset:], entity))
        return pairs

    def find_all(self) -> List[Any]:
        return [entity for _, entity in self.items()]

    def keys(self) -> List[str]:
        offset = len(self.prefix) + 1
        return [p.name[offset:] for p in self._entry_paths()]

    def flush(self, identifier: Identifier, entity: Any) -> bool:
        try:
            payload = self.serializer.dump(entity)
        except Exception as e:
            raise SerializationError(f"Failed to encode entity for {identifier!r}: {e}") from e

        path = self.path_for(identifier)
        tmp = path.with_name(f".{path.name}.tmp")
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            with open(tmp, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, path)
        except OSError:
            logger.exception("Failed to write entry %s", path)
            try:
                tmp.unlink()
            except OSError:
                pass
            return False
        logger.debug("Flushed %r to %s (%d bytes)", identifier, path.name, len(payload))
        return True

    def remove(self, identifier: Identifier, entity: Any = None) -> bool:
        path = self.path_for(identifier)
        try:
            path.unlink()
        except FileNotFoundError:
            return True
        except OSError:
            logger.exception("Failed to remove entry %s", path)
            return False
        logger.debug("Removed %r (%s)", identifier, path.name)
        return True

    def remove_all(self) -> bool:
        try:
            paths = self._entry_paths()
        except StorageIOError:
            logger.exception("Failed to list entries in %s", self.storage_dir)
            return False
        for path in paths:
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError:
                logger.exception("Failed to remove entry %s", path)
                return False
        logger.debug("Removed %d entries from %s", len(paths), self.storage_dir)
        return True
