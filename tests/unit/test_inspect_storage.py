import importlib.util
from pathlib import Path

from storage_lib.storage import FileStorage, storage_key

SCRIPT = Path(__file__).resolve().parents[2] / 'scripts' / 'inspect_storage.py'


def _main():
    spec = importlib.util.spec_from_file_location('inspect_storage', SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.main


def test_inspect_storage_lists_entries(tmp_path, capsys):
    s = FileStorage(tmp_path)
    s.flush(1, {'sku': 'foo'})
    assert _main()([str(tmp_path), '--json']) == 0
    out = capsys.readouterr()
    assert '"sku": "foo"' in out.out
    assert '1 entries' in out.err


def test_inspect_storage_reports_corruption(tmp_path, capsys):
    s = FileStorage(tmp_path)
    s.flush(1, {'sku': 'foo'})
    s.path_for(1).write_bytes(b'garbage')
    assert _main()([str(tmp_path)]) == 3
    assert 'Failed to read storage' in capsys.readouterr().err


def test_inspect_storage_pairs_each_key_with_its_entity(tmp_path, capsys):
    s = FileStorage(tmp_path)
    s.flush(1, {'sku': 'foo'})
    s.flush(2, {'sku': 'bar'})
    assert _main()([str(tmp_path), '--json']) == 0
    out = capsys.readouterr().out
    for ident, sku in ((1, "foo"), (2, "bar")):
        block = out.split(f"storage-model-{storage_key(ident)}:", 1)[1]
        assert f'"sku": "{sku}"' in block.split("storage-model-", 1)[0]
