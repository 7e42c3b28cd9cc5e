"""Storage configuration loaded from a YAML file.

Example `data/config/storage_config.yml`::

    backend: file
    storage_dir: ./data/storage
    serializer: pickle
    log_level: INFO
"""
from __future__ import annotations
from pathlib import Path
from typing import Any, Literal, Optional
import logging

from pydantic import BaseModel
import yaml

from storage_lib.storage import EntityStorage, create_storage
from storage_lib.storage.file_storage import DEFAULT_PREFIX
from storage_lib.storage.interfaces import EntityFactory

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("data/config/storage_config.yml")


class StorageConfig(BaseModel):
    backend: Literal["file", "memory"] = "file"
    storage_dir: str = "./data/storage"
    serializer: Literal["pickle", "json", "yaml"] = "pickle"
    prefix: str = DEFAULT_PREFIX
    log_level: str = "WARNING"


def load_config(path: Optional[Path] = None) -> StorageConfig:
    """Read the storage configuration, falling back to defaults if the file is missing.

    Raises `ValueError` for unparsable YAML or a document that is not a
    mapping; pydantic's `ValidationError` for invalid option values.
    """
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        logger.debug("No storage config at %s, using defaults", cfg_path)
        return StorageConfig()
    with cfg_path.open("r", encoding="utf-8") as f:
        try:
            data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError("invalid config format: parse error") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("invalid config format: expected mapping")
    cfg = StorageConfig(**data)
    logger.info("Loaded storage config from %s (backend=%s)", cfg_path, cfg.backend)
    return cfg


def storage_from_config(cfg: StorageConfig, entity_type: Optional[EntityFactory] = None) -> EntityStorage:
    return create_storage(
        backend=cfg.backend,
        serializer=cfg.serializer,
        data_dir=cfg.storage_dir,
        entity_type=entity_type,
        prefix=cfg.prefix,
    )
