"""Catalogue of the persisted resources and their per-resource policies."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from storeops.domain.ids import (
    DatedCounterIdPolicy,
    IdPolicy,
    SequentialIdPolicy,
    TimestampIdPolicy,
)


class Operation(str, Enum):
    LIST = "list"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


FULL_CRUD = frozenset(Operation)
APPEND_ONLY = frozenset({Operation.LIST, Operation.CREATE})


@dataclass(frozen=True)
class ResourceSpec:
    """
    One named collection stored in its own JSON file.

    ``label``/``plural`` feed the 500 messages ("Failed to read Amazon orders"),
    ``kind`` feeds the 400/404/409 ones ("Invalid order payload", "Order not found").
    """

    name: str
    label: str
    plural: str
    kind: str
    key_field: str = "id"
    id_policy: Optional[IdPolicy] = None
    operations: frozenset = FULL_CRUD
    upsert_on_update: bool = False

    @property
    def filename(self) -> str:
        return f"{self.name}.json"

    def supports(self, operation: Operation) -> bool:
        return operation in self.operations

    def invalid_payload_message(self) -> str:
        return f"Invalid {self.kind} payload"

    def not_found_message(self) -> str:
        return f"{self.kind.capitalize()} not found"

    def conflict_message(self) -> str:
        return f"{self.kind.capitalize()} already exists"

    def failure_message(self, operation: Operation) -> str:
        if operation is Operation.LIST:
            return f"Failed to read {self.plural}"
        verb = "save" if operation is Operation.CREATE else operation.value
        return f"Failed to {verb} {self.label}"


RESOURCES: tuple[ResourceSpec, ...] = (
    ResourceSpec(
        "products", "product", "products", "product",
        id_policy=SequentialIdPolicy("PROD-"),
    ),
    ResourceSpec(
        "orders", "order", "orders", "order",
        id_policy=DatedCounterIdPolicy("PH"),
    ),
    ResourceSpec(
        "amazon-orders", "Amazon order", "Amazon orders", "order",
        id_policy=DatedCounterIdPolicy("AMZ"),
        operations=APPEND_ONLY,
    ),
    ResourceSpec(
        "flipkart-orders", "Flipkart order", "Flipkart orders", "order",
        id_policy=DatedCounterIdPolicy("FLP"),
        operations=APPEND_ONLY,
    ),
    ResourceSpec(
        "wa-leads-orders", "WA Leads order", "WA Leads orders", "order",
        id_policy=DatedCounterIdPolicy("WAL"),
    ),
    ResourceSpec(
        "abandoned-cart-orders", "Abandoned Cart order", "Abandoned Cart orders", "order",
        id_policy=DatedCounterIdPolicy("ABC"),
        operations=APPEND_ONLY,
    ),
    ResourceSpec(
        "meta-spend", "Meta spend", "Meta spend", "record",
        id_policy=TimestampIdPolicy("META"),
    ),
    ResourceSpec(
        "amazon-spend", "Amazon spend", "Amazon spend", "record",
        id_policy=TimestampIdPolicy("AMZ"),
    ),
    ResourceSpec(
        "flipkart-spend", "Flipkart spend", "Flipkart spend", "record",
        id_policy=TimestampIdPolicy("FLP"),
    ),
    ResourceSpec(
        "misc-spend", "Misc spend", "Misc spend", "record",
        id_policy=TimestampIdPolicy("MISC"),
    ),
    ResourceSpec(
        "gurugram-marts", "Gurugram mart", "Gurugram marts", "mart",
        id_policy=TimestampIdPolicy("GGM"),
    ),
    ResourceSpec(
        "delhi-marts", "Delhi mart", "Delhi marts", "mart",
        id_policy=TimestampIdPolicy("DLM"),
    ),
    ResourceSpec(
        "followups", "followup", "followups", "followup",
        key_field="customerPhone",
        upsert_on_update=True,
    ),
)


def get_resource(name: str) -> ResourceSpec:
    for spec in RESOURCES:
        if spec.name == name:
            return spec
    raise KeyError(name)
