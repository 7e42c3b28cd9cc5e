"""Pytest configuration for the storage tests.

Puts the repo root on sys.path so `storage_lib` and `tests.helpers` import
without installing the package, and provides an empty storage directory.
"""
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def storage_dir(tmp_path):
    d = tmp_path / "storage-cache"
    d.mkdir()
    return d
