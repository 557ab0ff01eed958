"""
EduChain Ledger: FastAPI Application.

Entry point for the API server.
Run: python -m educhain.main  (or uvicorn educhain.main:app --port 5000)
"""

import asyncio
import random
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from educhain.config import settings
from educhain.db.engine import close_db, get_engine, init_db
from educhain.logging_config import configure_logging
from educhain.middleware.error_handler import ErrorHandlerMiddleware, register_exception_handlers
from educhain.middleware.request_context import RequestContextMiddleware
from educhain.middleware.session_auth import SessionAuthMiddleware
from educhain.services.ledger_sim import SimulatedLedger

from educhain.api.routers.anomalies import router as anomalies_router
from educhain.api.routers.audit_logs import router as audit_logs_router
from educhain.api.routers.auth import router as auth_router
from educhain.api.routers.blockchain import router as blockchain_router
from educhain.api.routers.dashboard import router as dashboard_router
from educhain.api.routers.transactions import router as transactions_router
from educhain.api.routers.transcripts import router as transcripts_router
from educhain.api.routers.universities import router as universities_router

configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info("educhain_starting", version=settings.app_version, environment=settings.environment)
    if settings.verify_by_hash_lookup:
        logger.info("hash_verification_mode", mode="lookup")
    else:
        logger.warning("hash_verification_mode", mode="mock", msg="Public verify-by-hash answers from a sample record")
    await init_db()
    yield
    await close_db()
    logger.info("educhain_shutdown")


def create_app(ledger: Optional[SimulatedLedger] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Academic credential issuance and verification, plus financial "
            "anomaly monitoring for universities.\n\n"
            "## Authentication\n"
            "All /api endpoints except `POST /api/transcripts/verify` require a "
            "session from the identity provider, sent as the session cookie or "
            "as `Authorization: Bearer <token>`.\n"
        ),
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_tags=[
            {"name": "health", "description": "Liveness and readiness probes"},
            {"name": "auth", "description": "Current user"},
            {"name": "dashboard", "description": "Aggregated dashboard statistics"},
            {"name": "universities", "description": "University registry and verification"},
            {"name": "transcripts", "description": "Transcript issuance and verification"},
            {"name": "transactions", "description": "Financial transactions (risk-scored)"},
            {"name": "anomalies", "description": "Flagged transactions and resolution"},
            {"name": "audit", "description": "Append-only audit log"},
            {"name": "blockchain", "description": "Simulated ledger operations"},
        ],
    )
    app.state.ledger = ledger or SimulatedLedger(random.Random())

    # ── Middleware (last added = outermost) ──────────────────────────────
    app.add_middleware(SessionAuthMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(RequestContextMiddleware)
    # CORS is outermost
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # ── Routes ────────────────────────────────────────────────────────
    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(universities_router)
    app.include_router(transcripts_router)
    app.include_router(transactions_router)
    app.include_router(anomalies_router)
    app.include_router(audit_logs_router)
    app.include_router(blockchain_router)

    @app.get("/health", tags=["health"])
    async def health():
        """Liveness probe. Does NOT check dependencies; use /ready for that."""
        return {
            "status": "ok",
            "version": settings.app_version,
            "service": "educhain",
        }

    @app.get("/ready", tags=["health"])
    async def readiness():
        """Readiness probe. 200 when the database answers, 503 otherwise."""
        checks: dict = {"api": "ok"}
        try:
            async with get_engine().connect() as conn:
                await asyncio.wait_for(
                    conn.execute(text("SELECT 1")),
                    timeout=settings.health_check_timeout_seconds,
                )
            checks["database"] = "ok"
        except Exception as exc:
            logger.warning("readiness_database_unavailable", error=str(exc))
            checks["database"] = "unavailable"

        db_ok = checks["database"] == "ok"
        return JSONResponse(
            status_code=200 if db_ok else 503,
            content={
                "status": "ok" if db_ok else "unavailable",
                "version": settings.app_version,
                "service": "educhain",
                "environment": settings.environment,
                "checks": checks,
                "timestamp": datetime.utcnow().isoformat(),
            },
        )

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "educhain.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
