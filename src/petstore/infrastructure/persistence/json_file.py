"""File helpers shared by the JSON-backed repositories.

Each repository owns one JSON file holding a list of records.  The whole
file is read and rewritten on every operation.
"""

from __future__ import annotations

import json
from pathlib import Path


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def load(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    @staticmethod
    def next_id(records: list[dict]) -> int:
        if not records:
            return 1
        return max(r["id"] for r in records) + 1

    @staticmethod
    def upsert(records: list[dict], record: dict) -> None:
        """Replace the record with the same id, otherwise append."""
        for i, raw in enumerate(records):
            if raw["id"] == record["id"]:
                records[i] = record
                return
        records.append(record)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


class OrderReferences:
    """Read-only view of the orders file used to guard removals.

    Order lines point at products and orders point at customers by id;
    neither may disappear while such an order exists.
    """

    def __init__(self, orders_file: Path) -> None:
        self._file = JsonFile(orders_file)

    def product_ids(self) -> set[int]:
        return {
            line["product_id"]
            for order in self._file.load()
            for line in order["order_lines"]
        }

    def customer_ids(self) -> set[int]:
        return {order["customer_id"] for order in self._file.load()}
