"""Current-user endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.api.deps import get_db, get_session_claims
from educhain.db.repositories.user import user_repo
from educhain.schemas.user import UserResponse

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("/user", response_model=UserResponse)
async def current_user(
    db: AsyncSession = Depends(get_db),
    claims: dict = Depends(get_session_claims),
):
    """Return the signed-in user, creating the row on first sight."""
    return await user_repo.upsert(
        db,
        claims["sub"],
        email=claims.get("email"),
        first_name=claims.get("first_name"),
        last_name=claims.get("last_name"),
        profile_image_url=claims.get("profile_image_url"),
        role=claims.get("role"),
    )
