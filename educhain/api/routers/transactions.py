"""Transaction endpoints. New transactions are risk-scored on the way in."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.api.deps import get_db, get_user_id
from educhain.db.repositories.transaction import transaction_repo
from educhain.schemas.transaction import TransactionCreate, TransactionResponse, TransactionType
from educhain.services.transaction_service import TransactionService

router = APIRouter(prefix="/api/transactions", tags=["transactions"])

_service = TransactionService()


@router.get("", response_model=list[TransactionResponse])
async def list_transactions(
    limit: int = Query(default=50, ge=1, le=500),
    type: Optional[TransactionType] = Query(default=None),
    db: AsyncSession = Depends(get_db),
):
    """Newest first. Filtering by type returns every match."""
    if type is not None:
        return await transaction_repo.list_by_type(db, type)
    return await transaction_repo.list(db, limit=limit)


@router.post("", response_model=TransactionResponse)
async def create_transaction(
    body: TransactionCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    recorded = await _service.record(db, body, user_id=user_id)
    return recorded.transaction
