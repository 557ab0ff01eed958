"""Pydantic schemas for Anomaly resource."""

import uuid
from datetime import datetime

from educhain.schemas.base import CamelModel, RiskScore


class AnomalyResponse(CamelModel):
    id: uuid.UUID
    transaction_id: uuid.UUID
    risk_score: RiskScore
    description: str
    severity: str
    resolved: bool
    timestamp: datetime
