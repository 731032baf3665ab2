"""
JSON file key-value store.

One file per key under a root directory. Each file holds the value
plus a checksum of it so a hand-edited or truncated file is reported
instead of silently loaded.

File layout:
    {
      "key": "Inventory/1234",
      "value": [...],
      "checksum": "<base64 sha256>"
    }
"""

from __future__ import annotations

import base64
import hashlib
import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import quote

from hostengine.store.base import KeyValueStore, StoreError


logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """
    Persistent store writing one JSON document per key.

    Usage:
        store = JsonFileStore("game/registry")
        store.set("Settings/42", {"volume": 0.5})
        store.get("Settings/42")
    """

    SUFFIX = ".json"

    def __init__(self, root: str | Path, validate: bool = True):
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)
        self.validate = validate

    def _get_key_path(self, key: str) -> Path:
        """Map a key to a filesystem-safe file name."""
        return self.root / f"{quote(key, safe='')}{self.SUFFIX}"

    def get(self, key: str) -> Any:
        path = self._get_key_path(key)
        if not path.exists():
            return None

        try:
            with open(path, 'r', encoding='utf-8') as f:
                document = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read {path}: {e}", key=key) from e

        if not isinstance(document, dict) or 'value' not in document:
            raise StoreError(f"Malformed store file: {path}", key=key)

        value = document['value']
        checksum = document.get('checksum')
        if self.validate and checksum and checksum != self._calculate_checksum(value):
            raise StoreError(f"Checksum mismatch in {path}", key=key)

        return value

    def set(self, key: str, value: Any) -> None:
        path = self._get_key_path(key)
        try:
            document = {
                'key': key,
                'value': value,
                'checksum': self._calculate_checksum(value),
            }
            # Write to a sibling file first so a failed dump leaves the old value intact
            tmp_path = path.with_suffix(path.suffix + ".tmp")
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(document, f, indent=2)
            tmp_path.replace(path)
        except (OSError, TypeError, ValueError) as e:
            raise StoreError(f"Failed to write {path}: {e}", key=key) from e

        logger.debug(f"Wrote {key} to {path}")

    def delete(self, key: str) -> None:
        path = self._get_key_path(key)
        try:
            if path.exists():
                path.unlink()
        except OSError as e:
            raise StoreError(f"Failed to delete {path}: {e}", key=key) from e

    def _calculate_checksum(self, value: Any) -> str:
        """Base64 SHA-256 of the canonical JSON encoding."""
        json_str = json.dumps(value, sort_keys=True, separators=(',', ':'))
        hash_bytes = hashlib.sha256(json_str.encode('utf-8')).digest()
        return base64.b64encode(hash_bytes).decode('ascii')
