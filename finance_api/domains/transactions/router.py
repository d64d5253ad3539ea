"""Transactions router: CRUD over finance records."""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from finance_api.core.store import FinanceStore, get_store
from finance_api.domains.transactions.schemas import (
    DeleteAck,
    InsertAck,
    TransactionIn,
    TransactionOut,
    UpdateAck,
)
from finance_api.domains.transactions.service import (
    create_transaction,
    delete_transaction,
    get_transaction,
    list_transactions,
    update_transaction,
)

router = APIRouter(prefix="/finance", tags=["finance"])


@router.post("", response_model=InsertAck)
def add_finance(record: TransactionIn, store: FinanceStore = Depends(get_store)):
    """Store a new record; the response carries the generated id."""
    return create_transaction(store, record)


@router.get("", response_model=list[TransactionOut])
def get_all_finances(store: FinanceStore = Depends(get_store)):
    return list_transactions(store)


@router.get("/{finance_id}", response_model=TransactionOut)
def get_finance(finance_id: str, store: FinanceStore = Depends(get_store)):
    return get_transaction(store, finance_id)


@router.delete("/{finance_id}", response_model=DeleteAck)
def delete_finance(finance_id: str, store: FinanceStore = Depends(get_store)):
    """Delete a record. Unknown ids report ``deletedCount: 0``."""
    return delete_transaction(store, finance_id)


@router.patch("/{finance_id}", response_model=UpdateAck)
def edit_finance(
    finance_id: str,
    patch: Optional[TransactionIn] = Body(None),
    store: FinanceStore = Depends(get_store),
):
    """Replace the six mutable fields; omitted ones are cleared.

    A request without a body clears all six.
    """
    return update_transaction(store, finance_id, patch or TransactionIn())
