"""
Session Token Handling.

Sessions are issued by the external identity provider as HS256 JWTs. This
service only verifies them; ``create_session_token`` exists for local
development and tests.
"""

from datetime import datetime, timedelta

from jose import JWTError, jwt

from educhain.config import settings


class SessionError(Exception):
    """Raised when a session token is missing claims or fails validation."""

    pass


def create_session_token(
    sub: str,
    email: str | None = None,
    role: str = "student",
    first_name: str | None = None,
    last_name: str | None = None,
    profile_image_url: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Mint a session token the way the identity provider does."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.session_expire_minutes)

    now = datetime.utcnow()
    payload = {
        "sub": str(sub),
        "email": email,
        "first_name": first_name,
        "last_name": last_name,
        "profile_image_url": profile_image_url,
        "role": role,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.session_secret, algorithm=settings.session_algorithm)


def decode_session_token(token: str) -> dict:
    """
    Decode and validate a session token.

    Returns the claims dict (``sub`` is guaranteed present).
    Raises SessionError on any failure.
    """
    try:
        claims = jwt.decode(
            token,
            settings.session_secret,
            algorithms=[settings.session_algorithm],
        )
    except JWTError as e:
        raise SessionError(f"Invalid session: {e}") from e
    if not claims.get("sub"):
        raise SessionError("Session missing subject claim")
    return claims
