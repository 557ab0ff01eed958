"""
Session Authentication Middleware.

Every /api route requires a valid session from the identity provider,
except the public verify-by-hash endpoint. The token is read from the
session cookie, or from an ``Authorization: Bearer`` header for API clients.
"""

import structlog
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from educhain.auth.session import SessionError, decode_session_token
from educhain.config import settings

logger = structlog.get_logger(__name__)

# Paths that bypass authentication (public endpoints)
PUBLIC_PATHS = frozenset({
    "/health",
    "/ready",
    "/docs",
    "/openapi.json",
    "/redoc",
    "/api/transcripts/verify",
})


class SessionAuthMiddleware(BaseHTTPMiddleware):
    """Resolve the session into ``request.state`` or answer 401."""

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path

        # CORS preflight: always pass through (handled by CORSMiddleware)
        if request.method == "OPTIONS":
            return await call_next(request)

        if path in PUBLIC_PATHS or path.rstrip("/") in PUBLIC_PATHS:
            return await call_next(request)

        token = self._extract_token(request)
        if not token:
            return self._unauthorized()

        try:
            claims = decode_session_token(token)
        except SessionError as e:
            logger.warning("session_auth_failed", error=str(e), path=path)
            return self._unauthorized()

        request.state.user_id = claims["sub"]
        request.state.session_claims = claims
        structlog.contextvars.bind_contextvars(user_id=claims["sub"])

        return await call_next(request)

    @staticmethod
    def _unauthorized() -> Response:
        return JSONResponse(status_code=401, content={"message": "Unauthorized"})

    @staticmethod
    def _extract_token(request: Request) -> str | None:
        """Session cookie first, then Authorization: Bearer."""
        cookie = request.cookies.get(settings.session_cookie_name)
        if cookie:
            return cookie

        auth = request.headers.get("Authorization", "")
        if auth.startswith("Bearer "):
            return auth[7:]

        return None
