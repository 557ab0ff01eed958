"""Anomaly endpoints."""

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.api.deps import get_db, get_user_id
from educhain.db.repositories.anomaly import anomaly_repo
from educhain.exceptions import NotFoundError
from educhain.schemas.anomaly import AnomalyResponse
from educhain.services.audit_trail import get_audit_service

router = APIRouter(prefix="/api/anomalies", tags=["anomalies"])


@router.get("", response_model=list[AnomalyResponse])
async def list_anomalies(
    limit: int = Query(default=50, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
):
    return await anomaly_repo.list(db, limit=limit)


@router.api_route("/{anomaly_id}/resolve", methods=["POST", "PATCH"], response_model=AnomalyResponse)
async def resolve_anomaly(
    anomaly_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    """
    Mark an anomaly resolved.

    Unconditional: resolving twice is allowed and logs twice. The underlying
    transaction is left untouched.
    """
    anomaly = await anomaly_repo.mark_resolved(db, anomaly_id)
    if anomaly is None:
        raise NotFoundError("Failed to resolve anomaly")
    await get_audit_service().record(
        db,
        "anomaly_resolved",
        f"Anomaly resolved: {anomaly.description}",
        user_id=user_id,
        metadata={"anomalyId": str(anomaly_id)},
    )
    return anomaly
