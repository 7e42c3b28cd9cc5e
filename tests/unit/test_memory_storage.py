import pytest

from storage_lib.storage import MemoryStorage, SerializationError, storage_key
from storage_lib.storage.interfaces import StorageProtocol
from tests.helpers import Product, make_products


def test_memory_storage_crud():
    apple, pear = make_products()
    s = MemoryStorage(Product)
    assert isinstance(s, StorageProtocol)
    assert s.find(1) is None
    assert s.flush(1, apple) is True
    assert s.flush({'product_id': 2}, pear) is True
    assert s.find(1) == apple
    assert s.find({'product_id': 2}) == pear
    assert s.find_multiple([3, 1]) == [apple]
    assert sorted(p.id for p in s.find_all()) == [1, 2]
    assert s.remove(1) is True
    assert s.remove(1) is True
    assert s.has(1) is False
    assert s.remove_all() is True
    assert s.find_all() == []


def test_memory_storage_returns_copies():
    apple, _ = make_products()
    s = MemoryStorage()
    s.flush(1, apple)
    loaded = s.find(1)
    loaded.sku = 'changed'
    assert s.find(1).sku == 'foo'


def test_memory_storage_find_or_create():
    s = MemoryStorage(Product)
    assert isinstance(s.find_or_create(5), Product)
    assert len(s) == 0


def test_memory_storage_corrupted_entry():
    s = MemoryStorage()
    s.flush(1, 'value')
    s._store[s.keys()[0]] = b'garbage'
    with pytest.raises(SerializationError):
        s.find(1)


def test_memory_storage_items():
    apple, pear = make_products()
    s = MemoryStorage()
    s.flush(1, apple)
    s.flush(2, pear)
    assert dict(s.items()) == {storage_key(1): apple, storage_key(2): pear}
