from typing import Any, Callable, Dict, Optional, Protocol
import pickle
import json
import yaml


class Serializer(Protocol):
    """Serialize/deserialize entities for storage as bytes.

    Implementations should be symmetric: `dump` -> bytes, `load` <- bytes.
    """

    name: str

    def dump(self, value: Any) -> bytes: ...

    def load(self, data: bytes) -> Any: ...


class PickleSerializer:
    """Default serializer using pickle (binary).

    Entities may be arbitrary Python objects, and pickle round-trips them
    exactly. Only load entries written by a trusted process.
    """

    name = "pickle"

    def dump(self, value: Any) -> bytes:
        return pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)

    def load(self, data: bytes) -> Any:
        return pickle.loads(data)


class JSONSerializer:
    """Serializer using JSON (text).

    Plain objects are dumped through their `__dict__`. JSON carries no type
    information, so pass `factory` to rebuild entities from the decoded
    mapping; without it `load` returns the plain decoded value.
    """

    name = "json"

    def __init__(self, factory: Optional[Callable[[Dict[str, Any]], Any]] = None) -> None:
        self.factory = factory

    def dump(self, value: Any) -> bytes:
        return json.dumps(value, default=lambda o: o.__dict__, sort_keys=True).encode("utf-8")

    def load(self, data: bytes) -> Any:
        value = json.loads(data.decode("utf-8"))
        if self.factory is not None and isinstance(value, dict):
            return self.factory(value)
        return value


class YAMLSerializer:
    """Serializer using YAML (text). Caller must ensure values are YAML-serializable."""

    name = "yaml"

    def dump(self, value: Any) -> bytes:
        return yaml.safe_dump(value, sort_keys=False).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return yaml.safe_load(data.decode("utf-8"))


_SERIALIZERS: Dict[str, Callable[[], Serializer]] = {
    "pickle": PickleSerializer,
    "json": JSONSerializer,
    "yaml": YAMLSerializer,
}


def get_serializer(name: str) -> Serializer:
    """Return a new serializer registered under `name`."""
    try:
        return _SERIALIZERS[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown serializer: {name!r}") from None
