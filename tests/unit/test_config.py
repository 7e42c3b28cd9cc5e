import logging

import pytest
from pydantic import ValidationError

from storage_lib.config import StorageConfig, load_config, storage_from_config
from storage_lib.logging_config import configure_logging
from storage_lib.storage import FileStorage, MemoryStorage


def test_load_config_defaults_when_missing(tmp_path):
    cfg = load_config(tmp_path / 'missing.yml')
    assert cfg == StorageConfig()
    assert cfg.prefix == 'storage-model'


def test_load_config_from_yaml(tmp_path):
    p = tmp_path / 'storage_config.yml'
    p.write_text(f"backend: file\nstorage_dir: {tmp_path / 'entries'}\nserializer: json\n", encoding='utf-8')
    cfg = load_config(p)
    assert cfg.serializer == 'json'
    storage = storage_from_config(cfg)
    assert isinstance(storage, FileStorage)
    assert storage.storage_dir == tmp_path / 'entries'


def test_load_config_rejects_bad_documents(tmp_path):
    p = tmp_path / 'bad.yml'
    p.write_text("- just\n- a list\n", encoding='utf-8')
    with pytest.raises(ValueError):
        load_config(p)
    p.write_text("backend: [unclosed\n", encoding='utf-8')
    with pytest.raises(ValueError):
        load_config(p)
    p.write_text("backend: redis\n", encoding='utf-8')
    with pytest.raises(ValidationError):
        load_config(p)


def test_storage_from_config_memory():
    assert isinstance(storage_from_config(StorageConfig(backend='memory')), MemoryStorage)


def test_configure_logging_reads_level(tmp_path):
    p = tmp_path / 'storage_config.yml'
    p.write_text("log_level: debug\n", encoding='utf-8')
    configure_logging(p)
    assert logging.getLogger().level == logging.DEBUG
    configure_logging(tmp_path / 'missing.yml')
    assert logging.getLogger().level == logging.WARNING
