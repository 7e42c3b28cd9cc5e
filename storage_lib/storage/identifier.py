"""Identifier canonicalization and storage key derivation.

An identifier is either a scalar (int, str, float, bool) or a flat mapping
of field name to scalar. Composite identifiers are encoded with their fields
sorted by name so that two mappings holding the same pairs always map to the
same entry regardless of insertion order.
"""
from __future__ import annotations
import hashlib
from urllib.parse import urlencode
from typing import Any, Mapping, Union

from .errors import InvalidIdentifierError

Scalar = Union[int, str, float, bool]
Identifier = Union[Scalar, Mapping[str, Scalar]]

_SCALAR_TYPES = (int, str, float, bool)


def _scalar_text(value: Any, field: str | None = None) -> str:
    if not isinstance(value, _SCALAR_TYPES):
        where = f" for field {field!r}" if field is not None else ""
        raise InvalidIdentifierError(
            f"identifier value{where} must be a scalar, got {type(value).__name__}"
        )
    return str(value)


def canonicalize(identifier: Identifier) -> str:
    """Return the canonical string form of `identifier`.

    Scalars use their string representation. Mappings become
    URL-encoded ``field=value`` pairs joined by ``&`` in field-name order;
    escaping keeps ``&`` or ``=`` inside a value from forging extra pairs.
    """
    if isinstance(identifier, Mapping):
        pairs = [
            (str(field), _scalar_text(identifier[field], str(field)))
            for field in sorted(identifier, key=str)
        ]
        return urlencode(pairs)
    return _scalar_text(identifier)


def storage_key(identifier: Identifier) -> str:
    """Derive a file-name safe key (hex SHA-256 of the canonical form)."""
    canonical = canonicalize(identifier)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
