"""Pydantic schemas for User resource."""

import uuid
from datetime import datetime
from typing import Optional

from educhain.schemas.base import CamelModel


class UserResponse(CamelModel):
    id: str
    email: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    profile_image_url: Optional[str]
    role: str
    university_id: Optional[uuid.UUID]
    created_at: datetime
    updated_at: datetime
