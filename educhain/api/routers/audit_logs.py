"""
Audit Log API Endpoint.

GET /api/audit-logs: newest first, optional eventType filter.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.api.deps import get_db
from educhain.schemas.audit import AuditLogResponse
from educhain.services.audit_trail import get_audit_service

router = APIRouter(prefix="/api/audit-logs", tags=["audit"])


@router.get("", response_model=list[AuditLogResponse])
async def list_audit_logs(
    limit: int = Query(default=100, ge=1, le=500),
    event_type: Optional[str] = Query(default=None, alias="eventType"),
    db: AsyncSession = Depends(get_db),
):
    return await get_audit_service().recent(db, limit=limit, event_type=event_type)
