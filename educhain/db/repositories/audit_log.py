"""Audit log repository. Append and read only."""

from typing import Optional, Sequence

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.db.models import AuditLog
from educhain.db.repositories.base import BaseRepository


class AuditLogRepository(BaseRepository[AuditLog, BaseModel]):
    order_column = "timestamp"

    def __init__(self):
        super().__init__(AuditLog)

    async def append(
        self,
        db: AsyncSession,
        *,
        event_type: str,
        description: str,
        user_id: Optional[str] = None,
        metadata: Optional[dict] = None,
    ) -> AuditLog:
        entry = AuditLog(
            event_type=event_type,
            user_id=user_id,
            description=description,
            metadata_=metadata,
        )
        db.add(entry)
        await db.flush()
        await db.refresh(entry)
        return entry

    async def recent(
        self,
        db: AsyncSession,
        limit: int = 100,
        event_type: Optional[str] = None,
    ) -> Sequence[AuditLog]:
        filters = [AuditLog.event_type == event_type] if event_type else []
        return await self.list(db, 0, limit, *filters)


audit_log_repo = AuditLogRepository()
