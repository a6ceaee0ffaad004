"""
Transaction history endpoints.
"""

from fastapi import APIRouter, Depends, Query

from quickpos.api.dependencies import get_store
from quickpos.application.dto.responses import TransactionResponse
from quickpos.core.exceptions import TransactionNotFoundError
from quickpos.core.interfaces import ITransactionStore

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


@router.get("", response_model=list[TransactionResponse])
async def list_transactions(
    limit: int | None = Query(default=None, ge=1, description="Newest N only"),
    store: ITransactionStore = Depends(get_store),
) -> list[TransactionResponse]:
    """Committed transactions in commit order."""
    return [
        TransactionResponse.model_validate(tx)
        for tx in store.list_transactions(limit=limit)
    ]


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: str,
    store: ITransactionStore = Depends(get_store),
) -> TransactionResponse:
    transaction = store.get(transaction_id)
    if transaction is None:
        raise TransactionNotFoundError(transaction_id)
    return TransactionResponse.model_validate(transaction)
