"""Anomaly repository."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.db.models import Anomaly
from educhain.db.repositories.base import BaseRepository


class AnomalyRepository(BaseRepository[Anomaly, BaseModel]):
    order_column = "timestamp"

    def __init__(self):
        super().__init__(Anomaly)

    async def add(
        self,
        db: AsyncSession,
        *,
        transaction_id: uuid.UUID,
        risk_score: Decimal,
        description: str,
        severity: str,
    ) -> Anomaly:
        anomaly = Anomaly(
            transaction_id=transaction_id,
            risk_score=risk_score,
            description=description,
            severity=severity,
        )
        db.add(anomaly)
        await db.flush()
        await db.refresh(anomaly)
        return anomaly

    async def mark_resolved(self, db: AsyncSession, id: uuid.UUID) -> Optional[Anomaly]:
        return await self.set_fields(db, id, resolved=True)

    async def count_unresolved(self, db: AsyncSession) -> int:
        return await self.count(db, Anomaly.resolved.is_(False))

    async def recent_risk_scores(
        self, db: AsyncSession, since: datetime, limit: int = 100
    ) -> Sequence[Decimal]:
        """Risk scores of anomalies raised after ``since``, newest first."""
        result = await db.execute(
            select(Anomaly.risk_score)
            .where(Anomaly.timestamp > since)
            .order_by(Anomaly.timestamp.desc())
            .limit(limit)
        )
        return result.scalars().all()


anomaly_repo = AnomalyRepository()
