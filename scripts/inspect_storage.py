#!/usr/bin/env python3
"""Small CLI to list the entries of a storage directory and print their content.

Warning: the pickle serializer can execute arbitrary code while loading.
Use only on directories you trust.
"""

from __future__ import annotations

import argparse
import json
import pprint
import sys

from storage_lib.storage import FileStorage, StorageError, get_serializer
from storage_lib.storage.file_storage import DEFAULT_PREFIX


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List storage entries and show their contents")
    p.add_argument("storage_dir", help="Path to the storage directory")
    p.add_argument("-s", "--serializer", default="pickle", help="Serializer used for the entries (pickle, json, yaml)")
    p.add_argument("-p", "--prefix", default=DEFAULT_PREFIX, help="Entry file prefix")
    p.add_argument("-k", "--keys-only", action="store_true", help="Only list storage keys")
    p.add_argument("-j", "--json", action="store_true", help="Dump entities as JSON (falls back to repr)")
    return p.parse_args(argv)


def safe_json_dumps(obj):
    try:
        return json.dumps(obj, indent=2, default=lambda o: getattr(o, "__dict__", str(o)))
    except (TypeError, ValueError):
        return json.dumps({"repr": repr(obj)}, indent=2)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        storage = FileStorage(args.storage_dir, serializer=get_serializer(args.serializer), prefix=args.prefix)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    try:
        if args.keys_only:
            for key in storage.keys():
                print(key)
            return 0
        entries = storage.items()
    except StorageError as exc:
        print(f"Failed to read storage '{args.storage_dir}': {exc}", file=sys.stderr)
        return 3

    for key, entity in entries:
        text = safe_json_dumps(entity) if args.json else pprint.pformat(entity, width=120)
        print(f"{args.prefix}-{key}:\n{text}")
    print(f"{len(entries)} entries", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
