"""Error types raised by the storage providers.

A missing entry is never an error: lookups return ``None`` instead.
"""


class StorageError(Exception):
    """Base class for storage failures."""


class StorageIOError(StorageError):
    """Filesystem operation failed for a reason other than a missing entry."""


class SerializationError(StorageError):
    """Stored bytes could not be decoded, or an entity could not be encoded."""


class InvalidIdentifierError(StorageError, TypeError):
    """Identifier has a shape that cannot be canonicalized."""
