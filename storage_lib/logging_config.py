from __future__ import annotations
import logging
from pathlib import Path
import yaml
from typing import Optional

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s]: %(message)s'


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging for applications using the storage library.

    Reads `log_level` from the storage YAML config when present and
    reconfigures the root logger at that level (WARNING otherwise). Returns
    a module logger for the caller.
    """
    default_level = logging.WARNING

    cfg_path = config_path or Path('data/config/storage_config.yml')
    if cfg_path.exists():
        try:
            with cfg_path.open('r', encoding='utf-8') as _f:
                _cfg = yaml.safe_load(_f) or {}
            _lvl = _cfg.get('log_level') if isinstance(_cfg, dict) else None
            if isinstance(_lvl, str):
                _numeric = getattr(logging, _lvl.upper(), None)
                if isinstance(_numeric, int):
                    default_level = _numeric
        except (OSError, yaml.YAMLError):
            # If config parse fails, fall back to default level
            logging.getLogger(__name__).warning('Failed to read log level from %s', cfg_path)

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=default_level, format=LOG_FORMAT)
    logger = logging.getLogger(__name__)
    logger.info('Log level set to: %s', logging.getLevelName(default_level))
    return logger
