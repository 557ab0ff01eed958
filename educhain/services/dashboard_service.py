"""
Dashboard Service: aggregate metrics from SQL queries.

Computed on every call; nothing is cached or maintained incrementally.
"""

from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.db.repositories.anomaly import anomaly_repo
from educhain.db.repositories.transcript import transcript_repo
from educhain.db.repositories.university import university_repo
from educhain.schemas.dashboard import DashboardStats
from educhain.services.risk_scoring import MAX_RISK_SCORE

logger = structlog.get_logger(__name__)

RISK_WINDOW_DAYS = 7
RISK_SAMPLE_LIMIT = 100


def system_risk_score(scores: Sequence[Decimal]) -> float:
    """Mean of the sampled scores, capped at 10, rounded half-up to 0.1."""
    if not scores:
        return 0.0
    mean = sum((Decimal(s or 0) for s in scores), Decimal("0")) / len(scores)
    capped = min(MAX_RISK_SCORE, mean)
    return float(capped.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class DashboardService:
    """Compute dashboard statistics from the database."""

    async def get_stats(self, session: AsyncSession) -> DashboardStats:
        since = datetime.utcnow() - timedelta(days=RISK_WINDOW_DAYS)

        total_transcripts = await transcript_repo.count(session)
        active_universities = await university_repo.count_verified(session)
        open_anomalies = await anomaly_repo.count_unresolved(session)
        recent_scores = await anomaly_repo.recent_risk_scores(
            session, since, limit=RISK_SAMPLE_LIMIT
        )

        stats = DashboardStats(
            total_transcripts=total_transcripts,
            active_universities=active_universities,
            total_anomalies=open_anomalies,
            system_risk_score=system_risk_score(recent_scores),
        )
        logger.debug("dashboard_stats_computed", sampled_anomalies=len(recent_scores))
        return stats
