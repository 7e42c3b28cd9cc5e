from .config import StorageConfig, load_config, storage_from_config

__all__ = ["StorageConfig", "load_config", "storage_from_config"]
