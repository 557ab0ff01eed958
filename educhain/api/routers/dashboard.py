"""
Dashboard API Endpoint.

GET /api/dashboard/stats: headline counters, computed per request.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.api.deps import get_db
from educhain.schemas.dashboard import DashboardStats
from educhain.services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

_service = DashboardService()


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(db: AsyncSession = Depends(get_db)):
    return await _service.get_stats(db)
