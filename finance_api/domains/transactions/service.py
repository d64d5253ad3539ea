"""Transaction service: create, read, update and delete finance records.

Each function performs exactly one store round-trip and keeps no state
between calls.
"""

from typing import Any

import structlog

from finance_api.core.errors import NotFoundError
from finance_api.core.store import FinanceStore
from finance_api.domains.transactions.schemas import (
    MUTABLE_FIELDS,
    DeleteAck,
    InsertAck,
    TransactionIn,
    UpdateAck,
)

logger = structlog.get_logger()


def create_transaction(store: FinanceStore, record: TransactionIn) -> InsertAck:
    """Store a new record. Only the fields the client sent are written."""
    row = store.insert(record.model_dump(exclude_unset=True))
    logger.info("finance_created", id=row["id"])
    return InsertAck(inserted_id=str(row["id"]))


def list_transactions(store: FinanceStore) -> list[dict[str, Any]]:
    return store.find_all()


def get_transaction(store: FinanceStore, record_id: str) -> dict[str, Any]:
    record = store.find_one(record_id)
    if record is None:
        raise NotFoundError(f"Finance record {record_id} not found")
    return record


def delete_transaction(store: FinanceStore, record_id: str) -> DeleteAck:
    deleted = store.delete(record_id)
    logger.info("finance_deleted", id=record_id, deleted_count=deleted)
    return DeleteAck(deleted_count=deleted)


def update_transaction(store: FinanceStore, record_id: str, patch: TransactionIn) -> UpdateAck:
    """Overwrite all six mutable fields from ``patch``.

    Fields missing from the patch are written as null rather than left
    untouched: an update replaces the whole record body, not a merge.
    """
    values = patch.model_dump()
    fields = {name: values[name] for name in MUTABLE_FIELDS}
    matched = store.update(record_id, fields)
    logger.info("finance_updated", id=record_id, matched_count=matched)
    # PostgREST only reports rows touched, so matched and modified coincide
    return UpdateAck(matched_count=matched, modified_count=matched)
