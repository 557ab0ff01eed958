"""Pydantic schemas for Transaction resource."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field

from educhain.schemas.base import CamelModel, RiskScore

TransactionType = Literal["tuition", "grants", "fees", "services"]
TransactionStatus = Literal["pending", "completed", "failed"]


class TransactionCreate(CamelModel):
    type: TransactionType
    amount: Decimal = Field(max_digits=10, decimal_places=2)
    currency: str = Field(default="USD", min_length=3, max_length=3)
    university_id: Optional[uuid.UUID] = None
    student_id: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    status: TransactionStatus = "completed"


class TransactionResponse(CamelModel):
    id: uuid.UUID
    type: str
    amount: Decimal
    currency: str
    university_id: Optional[uuid.UUID]
    student_id: Optional[str]
    description: Optional[str]
    status: str
    risk_score: RiskScore
    timestamp: datetime
