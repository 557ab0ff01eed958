"""
FastAPI dependencies for API routes.

Re-exports auth dependencies for convenience.
"""

from fastapi import Request

from educhain.auth.dependencies import get_db, get_session_claims, get_user_id
from educhain.services.ledger_sim import SimulatedLedger


def get_ledger(request: Request) -> SimulatedLedger:
    """The application's simulated ledger (created in ``create_app``)."""
    return request.app.state.ledger


__all__ = ["get_db", "get_ledger", "get_session_claims", "get_user_id"]
