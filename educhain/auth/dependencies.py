"""
FastAPI dependencies for the database session and the signed-in user.
"""

from typing import AsyncGenerator

from fastapi import HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.db.engine import get_db_session


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """One session per request; the handler's writes and audit entries commit together."""
    async with get_db_session() as session:
        yield session


def get_user_id(request: Request) -> str:
    """Extract the identity provider subject (set by SessionAuthMiddleware)."""
    user_id = getattr(request.state, "user_id", None)
    if not user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return str(user_id)


def get_session_claims(request: Request) -> dict:
    """Full claim set of the current session."""
    claims = getattr(request.state, "session_claims", None)
    if not claims:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return claims
