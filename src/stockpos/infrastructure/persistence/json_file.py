"""Shared file helpers for the JSON-backed repositories."""

from __future__ import annotations

import json
from pathlib import Path


class JsonRecordFile:
    """A JSON file holding a list of records.

    The file is created as ``[]`` on first use.  Each write goes to a
    sibling ``.tmp`` file that is then renamed over the live one, so
    readers see either the old list or the new one.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        staging = self._file_path.with_name(self._file_path.name + ".tmp")
        staging.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
        staging.replace(self._file_path)

    def upsert(self, record: dict, key: str = "id") -> None:
        """Replace the record with the same *key*, or append it."""
        records = self.load()
        for i, raw in enumerate(records):
            if raw[key] == record[key]:
                records[i] = record
                break
        else:
            records.append(record)
        self.persist(records)

    def remove(self, value: str, key: str = "id") -> None:
        records = [raw for raw in self.load() if raw[key] != value]
        self.persist(records)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
