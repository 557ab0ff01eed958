"""Pydantic schemas for University resource."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from educhain.schemas.base import CamelModel


class UniversityCreate(CamelModel):
    name: str = Field(min_length=1, max_length=500)
    wallet_address: Optional[str] = Field(default=None, max_length=255)
    contact_email: Optional[EmailStr] = None
    website: Optional[str] = Field(default=None, max_length=1024)


class UniversityResponse(CamelModel):
    id: uuid.UUID
    name: str
    verified: bool
    wallet_address: Optional[str]
    contact_email: Optional[str]
    website: Optional[str]
    created_at: datetime
