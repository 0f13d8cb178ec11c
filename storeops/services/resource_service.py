"""List/create/update/delete use cases for one resource."""

from __future__ import annotations

import threading
from contextlib import nullcontext
from datetime import datetime
from typing import Any, Callable, ContextManager, Optional

from storeops.core.logger import get_logger
from storeops.domain.records import InvalidRecordError, Record, ensure_object, find_index
from storeops.domain.resources import ResourceSpec
from storeops.repositories.json_storage import RecordStore

log = get_logger("resources")


class ResourceError(Exception):
    """Base exception for resource workflows."""


class InvalidPayloadError(ResourceError):
    """Raised when the body is not a JSON object or carries a malformed key."""


class RecordNotFoundError(ResourceError):
    """Raised when no record matches the identifying key."""


class DuplicateRecordError(ResourceError):
    """Raised when a create would reuse an identifying key."""


class ResourceService:
    """Load-mutate-save cycles against a single RecordStore."""

    def __init__(
        self,
        spec: ResourceSpec,
        store: RecordStore,
        *,
        lock: Optional[ContextManager[Any]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.spec = spec
        self.store = store
        self._lock = lock if lock is not None else threading.Lock()
        self._clock = clock or datetime.now

    @classmethod
    def unlocked(cls, spec: ResourceSpec, store: RecordStore, **kwargs: Any) -> "ResourceService":
        return cls(spec, store, lock=nullcontext(), **kwargs)

    def list(self) -> list[Any]:
        return self.store.load()

    def create(self, payload: Any) -> dict[str, Any]:
        spec = self.spec
        try:
            record = Record.from_payload(payload, spec.key_field)
        except InvalidRecordError as exc:
            raise InvalidPayloadError(str(exc)) from exc

        with self._lock:
            records = self.store.load()
            policy = spec.id_policy
            if policy is not None and (policy.overwrite or record.key is None):
                record = record.with_key(policy.next_id(records, self._clock()))
            if record.key is None:
                raise InvalidPayloadError(f"{spec.key_field} is required")
            if find_index(records, spec.key_field, record.key) != -1:
                raise DuplicateRecordError(record.key)
            created = record.as_dict()
            records.append(created)
            self.store.save(records)
        log.info("created %s %s", spec.name, record.key)
        return created

    def update(self, key: str, payload: Any) -> dict[str, Any]:
        """Merge ``payload`` into the record at ``key`` (or insert it when the resource upserts)."""
        spec = self.spec
        try:
            ensure_object(payload)
        except InvalidRecordError as exc:
            raise InvalidPayloadError(str(exc)) from exc

        with self._lock:
            records = self.store.load()
            index = find_index(records, spec.key_field, key)
            if index == -1:
                if not spec.upsert_on_update:
                    raise RecordNotFoundError(key)
                updated = {**payload, spec.key_field: key}
                records.append(updated)
                created = True
            else:
                updated = Record(spec.key_field, records[index]).merged(payload).with_key(key).as_dict()
                records[index] = updated
                created = False
            self.store.save(records)
        log.info("%s %s %s", "upserted" if created else "updated", spec.name, key)
        return updated

    def delete(self, key: str) -> None:
        spec = self.spec
        with self._lock:
            records = self.store.load()
            index = find_index(records, spec.key_field, key)
            if index == -1:
                raise RecordNotFoundError(key)
            del records[index]
            self.store.save(records)
        log.info("deleted %s %s", spec.name, key)
