"""Transcript repository."""

import uuid
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.db.models import Transcript
from educhain.db.repositories.base import BaseRepository
from educhain.schemas.transcript import TranscriptCreate


def issuance_identifiers() -> dict[str, str]:
    """Random identifiers handed out with every new transcript."""
    return {
        "qr_code": str(uuid.uuid4()),
        "ipfs_hash": f"Qm{uuid.uuid4().hex}",
        "block_txn": f"0x{uuid.uuid4().hex}",
    }


class TranscriptRepository(BaseRepository[Transcript, TranscriptCreate]):
    def __init__(self):
        super().__init__(Transcript)

    async def issue(self, db: AsyncSession, data: TranscriptCreate) -> Transcript:
        """Create an unverified transcript with fresh QR / IPFS / block identifiers."""
        return await self.create(db, data, **issuance_identifiers())

    async def mark_verified(self, db: AsyncSession, id: uuid.UUID) -> Optional[Transcript]:
        return await self.set_fields(db, id, verified=True)

    async def find_by_hash(self, db: AsyncSession, value: str) -> Optional[Transcript]:
        """Match any of the identifiers handed out at issuance."""
        result = await db.execute(
            select(Transcript)
            .where(
                or_(
                    Transcript.ipfs_hash == value,
                    Transcript.block_txn == value,
                    Transcript.qr_code == value,
                )
            )
            .order_by(Transcript.created_at.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()


transcript_repo = TranscriptRepository()
