"""Transaction repository."""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from educhain.db.models import Transaction
from educhain.db.repositories.base import BaseRepository
from educhain.schemas.transaction import TransactionCreate


class TransactionRepository(BaseRepository[Transaction, TransactionCreate]):
    order_column = "timestamp"

    def __init__(self):
        super().__init__(Transaction)

    async def list_by_type(self, db: AsyncSession, type: str) -> Sequence[Transaction]:
        """Every transaction of one type, newest first (unpaginated)."""
        return await self.list(db, 0, None, Transaction.type == type)


transaction_repo = TransactionRepository()
