"""Record type shared by every resource: an identifying key plus free-form fields."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping


class InvalidRecordError(ValueError):
    """Raised when a payload cannot be turned into a record."""


@dataclass
class Record:
    """A JSON object identified by ``data[key_field]``."""

    key_field: str
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any, key_field: str = "id") -> "Record":
        ensure_object(payload)
        key = payload.get(key_field)
        if key not in (None, "") and not isinstance(key, str):
            raise InvalidRecordError(f"{key_field} must be a string")
        return cls(key_field, dict(payload))

    @property
    def key(self) -> str | None:
        value = self.data.get(self.key_field)
        return value or None

    def with_key(self, key: str) -> "Record":
        data = dict(self.data)
        data[self.key_field] = key
        return Record(self.key_field, data)

    def merged(self, changes: Mapping[str, Any]) -> "Record":
        """Shallow merge; the current key always wins over one in ``changes``."""
        return Record(self.key_field, {**self.data, **changes, self.key_field: self.data.get(self.key_field)})

    def as_dict(self) -> dict[str, Any]:
        return dict(self.data)


def _is_finite(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, dict):
        return all(_is_finite(v) for v in value.values())
    if isinstance(value, list):
        return all(_is_finite(v) for v in value)
    return True


def ensure_object(payload: Any) -> dict[str, Any]:
    """Accept only a JSON object whose numbers are all finite (no NaN/Infinity)."""
    if not isinstance(payload, dict):
        raise InvalidRecordError("payload must be a JSON object")
    if not _is_finite(payload):
        raise InvalidRecordError("payload contains NaN or Infinity")
    return payload


def record_key(item: Any, key_field: str) -> Any:
    if isinstance(item, dict):
        return item.get(key_field)
    return None


def find_index(records: list[Any], key_field: str, key: str) -> int:
    """Position of the record whose key equals ``key``, or -1."""
    for index, item in enumerate(records):
        if record_key(item, key_field) == key:
            return index
    return -1


def find_duplicate_keys(records: Iterable[Any], key_field: str) -> list[str]:
    seen: set[Any] = set()
    duplicates: list[str] = []
    for item in records:
        key = record_key(item, key_field)
        if not isinstance(key, str):
            continue
        if key in seen and key not in duplicates:
            duplicates.append(key)
        seen.add(key)
    return duplicates
