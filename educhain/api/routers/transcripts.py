"""
Transcript endpoints.

POST /api/transcripts/verify is public and, unless hash lookup is enabled,
answers from a fixed sample record without touching storage.
"""

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.api.deps import get_db, get_user_id
from educhain.db.repositories.transcript import transcript_repo
from educhain.db.repositories.university import university_repo
from educhain.exceptions import InvalidRequestError, NotFoundError
from educhain.schemas.transcript import (
    HashVerificationRequest,
    HashVerificationResult,
    TranscriptCreate,
    TranscriptResponse,
)
from educhain.services.audit_trail import get_audit_service
from educhain.services.transcript_verification import TranscriptVerifier

router = APIRouter(prefix="/api/transcripts", tags=["transcripts"])


@router.get("", response_model=list[TranscriptResponse])
async def list_transcripts(
    limit: int = Query(default=50, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
):
    return await transcript_repo.list(db, limit=limit)


@router.post("", response_model=TranscriptResponse)
async def issue_transcript(
    body: TranscriptCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    """Issue a transcript for a student of a registered university."""
    if await university_repo.get_by_id(db, body.university_id) is None:
        raise NotFoundError("Failed to create transcript")

    transcript = await transcript_repo.issue(db, body)
    await get_audit_service().record(
        db,
        "transcript_issued",
        f"Transcript issued for {transcript.student_name}",
        user_id=user_id,
        metadata={"transcriptId": str(transcript.id)},
    )
    return transcript


@router.post("/verify", response_model=HashVerificationResult, response_model_exclude_none=True)
async def verify_by_hash(
    body: HashVerificationRequest,
    db: AsyncSession = Depends(get_db),
):
    """Verify a transcript by hash or QR payload. No session required."""
    if not body.hash:
        raise InvalidRequestError("Hash or QR code required")
    return await TranscriptVerifier().verify(db, body.hash)


@router.get("/{transcript_id}", response_model=TranscriptResponse)
async def get_transcript(transcript_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    transcript = await transcript_repo.get_by_id(db, transcript_id)
    if transcript is None:
        raise NotFoundError("Transcript not found")
    return transcript


@router.post("/{transcript_id}/verify", response_model=TranscriptResponse)
async def verify_transcript(
    transcript_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    """Mark a transcript verified."""
    transcript = await transcript_repo.mark_verified(db, transcript_id)
    if transcript is None:
        raise NotFoundError("Failed to verify transcript")
    await get_audit_service().record(
        db,
        "transcript_verified",
        f"Transcript verified for {transcript.student_name}",
        user_id=user_id,
        metadata={"transcriptId": str(transcript_id)},
    )
    return transcript
