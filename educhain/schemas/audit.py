"""
Audit Log API Schemas.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from educhain.schemas.base import CamelModel


class AuditLogResponse(CamelModel):
    """A single audit event."""
    id: uuid.UUID
    event_type: str
    user_id: Optional[str] = None
    description: str
    # ORM attribute is metadata_ (``metadata`` is reserved by SQLAlchemy)
    metadata: Optional[dict] = Field(
        default=None,
        validation_alias="metadata_",
        serialization_alias="metadata",
    )
    timestamp: datetime
