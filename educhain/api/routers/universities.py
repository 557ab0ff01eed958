"""University endpoints."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.api.deps import get_db, get_user_id
from educhain.db.repositories.university import university_repo
from educhain.exceptions import NotFoundError
from educhain.schemas.university import UniversityCreate, UniversityResponse
from educhain.services.audit_trail import get_audit_service

router = APIRouter(prefix="/api/universities", tags=["universities"])


@router.get("", response_model=list[UniversityResponse])
async def list_universities(db: AsyncSession = Depends(get_db)):
    """All universities, newest first."""
    return await university_repo.list(db, limit=None)


@router.post("", response_model=UniversityResponse)
async def create_university(
    body: UniversityCreate,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    """Register a university. It starts unverified."""
    university = await university_repo.create(db, body)
    await get_audit_service().record(
        db,
        "university_created",
        f'University "{university.name}" was created',
        user_id=user_id,
        metadata={"universityId": str(university.id)},
    )
    return university


@router.get("/{university_id}", response_model=UniversityResponse)
async def get_university(university_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    university = await university_repo.get_by_id(db, university_id)
    if university is None:
        raise NotFoundError("University not found")
    return university


@router.patch("/{university_id}/verify", response_model=UniversityResponse)
async def verify_university(
    university_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_user_id),
):
    """Mark a university verified. There is no way back."""
    university = await university_repo.mark_verified(db, university_id)
    if university is None:
        raise NotFoundError("Failed to verify university")
    await get_audit_service().record(
        db,
        "university_verified",
        f'University "{university.name}" was verified',
        user_id=user_id,
        metadata={"universityId": str(university_id)},
    )
    return university
