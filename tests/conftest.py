"""
Test fixtures for EduChain tests.

Provides:
- Async DB session fixture (SQLite in-memory, fresh per test)
- Session token for a signed-in user
- Authenticated and anonymous FastAPI test clients
- Sample data helpers
"""

import os
import random
import uuid
from datetime import datetime
from decimal import Decimal
from typing import AsyncGenerator

# Set testing mode before importing the app
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["VERIFY_BY_HASH_LOOKUP"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from educhain.api.deps import get_db
from educhain.auth.session import create_session_token
from educhain.db.engine import Base
from educhain.db.models import (  # noqa: F401 (register all models)
    Anomaly,
    AuditLog,
    Transaction,
    Transcript,
    University,
    User,
)
from educhain.main import create_app
from educhain.services.ledger_sim import SimulatedLedger

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"
TEST_USER_ID = "idp|test-user-1"


@pytest_asyncio.fixture
async def engine():
    """A fresh in-memory database with all tables."""
    eng = create_async_engine(
        TEST_DB_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Provide a DB session per test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


# ── Session Token Fixtures ───────────────────────────────────────────────


@pytest.fixture
def session_token() -> str:
    return create_session_token(
        sub=TEST_USER_ID,
        email="auditor@example.edu",
        role="financial_auditor",
        first_name="Abebe",
        last_name="Kebede",
    )


# ── App / Client Fixtures ────────────────────────────────────────────────


@pytest.fixture
def ledger() -> SimulatedLedger:
    return SimulatedLedger(random.Random(1234))


@pytest.fixture
def app(session_factory, ledger):
    """
    Application wired to the test database.

    Overrides get_db so the API sees the same data as the test fixtures.
    """
    application = create_app(ledger=ledger)

    async def _override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db] = _override_get_db
    yield application
    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app, session_token):
    """Client carrying the session cookie."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        cookies={"educhain_session": session_token},
    ) as c:
        yield c


@pytest_asyncio.fixture
async def anon_client(app):
    """Client with no session at all."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


# ── Sample Data Helpers ──────────────────────────────────────────────────


async def create_university(session: AsyncSession, name: str = "Addis Ababa University", **kwargs) -> University:
    university = University(
        name=name,
        verified=kwargs.get("verified", False),
        wallet_address=kwargs.get("wallet_address"),
        contact_email=kwargs.get("contact_email", "registrar@aau.edu.et"),
        website=kwargs.get("website"),
    )
    session.add(university)
    await session.flush()
    return university


async def create_transaction(
    session: AsyncSession,
    type: str = "tuition",
    amount: Decimal = Decimal("1200.00"),
    **kwargs,
) -> Transaction:
    transaction = Transaction(
        type=type,
        amount=amount,
        currency=kwargs.get("currency", "USD"),
        university_id=kwargs.get("university_id"),
        risk_score=kwargs.get("risk_score", Decimal("2.0")),
        timestamp=kwargs.get("timestamp", datetime.utcnow()),
    )
    session.add(transaction)
    await session.flush()
    return transaction


async def create_anomaly(
    session: AsyncSession,
    transaction_id: uuid.UUID,
    risk_score: Decimal = Decimal("8.5"),
    **kwargs,
) -> Anomaly:
    anomaly = Anomaly(
        transaction_id=transaction_id,
        risk_score=risk_score,
        description=kwargs.get("description", "High-risk tuition transaction detected"),
        severity=kwargs.get("severity", "high"),
        resolved=kwargs.get("resolved", False),
        timestamp=kwargs.get("timestamp", datetime.utcnow()),
    )
    session.add(anomaly)
    await session.flush()
    return anomaly
