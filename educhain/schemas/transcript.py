"""Pydantic schemas for Transcript resource and hash-based verification."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from educhain.schemas.base import CamelModel


class TranscriptCreate(CamelModel):
    student_id: str = Field(min_length=1, max_length=255)
    university_id: uuid.UUID
    student_name: str = Field(min_length=1, max_length=500)
    degree: str = Field(min_length=1, max_length=500)
    issue_date: datetime


class TranscriptResponse(CamelModel):
    id: uuid.UUID
    student_id: str
    university_id: uuid.UUID
    student_name: str
    degree: str
    issue_date: datetime
    ipfs_hash: Optional[str]
    block_txn: Optional[str]
    qr_code: Optional[str]
    verified: bool
    created_at: datetime


class HashVerificationRequest(CamelModel):
    """Body of the public verify-by-hash endpoint. Hash may also be a QR payload."""

    hash: Optional[str] = None


class HashVerificationResult(CamelModel):
    verified: bool
    student: Optional[str] = None
    university: Optional[str] = None
    degree: Optional[str] = None
    issue_date: Optional[str] = None
    transaction_hash: str
    found: Optional[bool] = None
    transcript_id: Optional[uuid.UUID] = None
