"""Id assignment policies used when a record is created."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Protocol

from storeops.domain.records import record_key


class IdPolicy(Protocol):
    # When True the generated id replaces any id sent by the client.
    overwrite: bool

    def next_id(self, records: list[Any], now: datetime) -> str:
        ...


def _existing_ids(records: Iterable[Any]) -> set[str]:
    return {key for key in (record_key(r, "id") for r in records) if isinstance(key, str)}


@dataclass(frozen=True)
class SequentialIdPolicy:
    """``PROD-1001``, ``PROD-1002``: one past the highest numeric suffix in use."""

    prefix: str
    floor: int = 1000
    overwrite: bool = True

    def next_id(self, records: list[Any], now: datetime) -> str:
        highest = self.floor
        for key in _existing_ids(records):
            if not key.startswith(self.prefix):
                continue
            try:
                highest = max(highest, int(key[len(self.prefix):]))
            except ValueError:
                continue
        return f"{self.prefix}{highest + 1}"


@dataclass(frozen=True)
class DatedCounterIdPolicy:
    """``PH-20250101-1005``: today's date plus a counter derived from the record count."""

    prefix: str
    base: int = 1000
    overwrite: bool = False

    def next_id(self, records: list[Any], now: datetime) -> str:
        taken = _existing_ids(records)
        counter = self.base + len(records) + 1
        candidate = f"{self.prefix}-{now:%Y%m%d}-{counter}"
        while candidate in taken:
            counter += 1
            candidate = f"{self.prefix}-{now:%Y%m%d}-{counter}"
        return candidate


@dataclass(frozen=True)
class TimestampIdPolicy:
    """``META-1735689600000``: milliseconds since the epoch."""

    prefix: str
    overwrite: bool = False

    def next_id(self, records: list[Any], now: datetime) -> str:
        taken = _existing_ids(records)
        millis = int(now.timestamp() * 1000)
        while f"{self.prefix}-{millis}" in taken:
            millis += 1
        return f"{self.prefix}-{millis}"
