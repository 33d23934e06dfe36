"""JSON-file-backed implementation of KeyValueStorage.

All keys live in one JSON object in a single file, the on-disk
counterpart of a browser profile's storage area.  Every I/O or decoding
problem surfaces as ``StorageError``.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.exceptions import StorageError
from storefront.domain.repository.key_value_storage import KeyValueStorage


class FileKeyValueStorage(KeyValueStorage):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- KeyValueStorage interface --------------------------------------------

    def get(self, key: str) -> str | None:
        value = self._load_raw().get(key)
        if value is not None and not isinstance(value, str):
            raise StorageError(f"Value under '{key}' in {self._file_path} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        records = self._load_raw()
        records[key] = value
        self._persist_raw(records)

    def remove(self, key: str) -> None:
        records = self._load_raw()
        if records.pop(key, None) is not None:
            self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, str]:
        if not self._file_path.exists():
            return {}
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read storage file {self._file_path}") from exc
        if not isinstance(raw, dict):
            raise StorageError(f"Storage file {self._file_path} is not a JSON object")
        return raw

    def _persist_raw(self, records: dict[str, str]) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(records, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StorageError(f"Cannot write storage file {self._file_path}") from exc
