"""
Dashboard API Schemas.

Every field traces to a real SQL query.
"""

from educhain.schemas.base import CamelModel


class DashboardStats(CamelModel):
    """Headline counters for the dashboard landing page."""
    total_transcripts: int = 0
    active_universities: int = 0
    total_anomalies: int = 0
    system_risk_score: float = 0.0
