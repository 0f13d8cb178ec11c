"""
JSON-file persistence adapter.

Each resource lives in one file holding a top-level array. Services receive a
store through the RecordStore interface so tests can swap in MemoryStore.
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Iterable, Optional, Protocol


class StorageError(Exception):
    """Raised when a resource file cannot be read, parsed or written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class RecordStore(Protocol):
    def load(self) -> list[Any]:
        ...

    def save(self, records: list[Any]) -> None:
        ...


def dumps(records: Iterable[Any]) -> str:
    return json.dumps(list(records), ensure_ascii=False, indent=2, allow_nan=False)


class JsonFileStore:
    """Whole-file read/write access to one JSON array."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> list[Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(self.path, f"read failed: {exc}") from exc
        if not raw.strip():
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(self.path, f"malformed JSON: {exc}") from exc
        if not isinstance(data, list):
            raise StorageError(self.path, "top-level value is not an array")
        return data

    def save(self, records: list[Any]) -> None:
        # Each writer gets its own temp file so concurrent saves never share one.
        tmp: Optional[Path] = None
        try:
            payload = dumps(records)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=self.path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp = Path(fh.name)
                fh.write(payload)
            os.replace(tmp, self.path)
            tmp = None
        except (OSError, TypeError, ValueError) as exc:
            raise StorageError(self.path, f"write failed: {exc}") from exc
        finally:
            if tmp is not None:
                tmp.unlink(missing_ok=True)


class MemoryStore:
    """In-memory RecordStore for tests; copies on the way in and out."""

    def __init__(self, records: Optional[list[Any]] = None) -> None:
        self.records: list[Any] = copy.deepcopy(records or [])
        self.saves = 0

    def load(self) -> list[Any]:
        return copy.deepcopy(self.records)

    def save(self, records: list[Any]) -> None:
        self.records = copy.deepcopy(list(records))
        self.saves += 1
