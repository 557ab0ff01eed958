"""
EduChain SQLAlchemy Models.

Six tables: users, universities, transcripts, transactions, anomalies,
audit_logs. Nothing is ever hard-deleted; audit_logs is append-only.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from educhain.db.compat import GUID, JSONType
from educhain.db.engine import Base


def _genuuid():
    return uuid.uuid4()


# ──────────────────────────────────────────────────────────────────────────────
# Identity
# ──────────────────────────────────────────────────────────────────────────────


class User(Base):
    """A person known to the identity provider. ``id`` is the provider's subject."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), unique=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(255))
    last_name: Mapped[Optional[str]] = mapped_column(String(255))
    profile_image_url: Mapped[Optional[str]] = mapped_column(String(1024))
    # superadmin | university_admin | financial_auditor | student
    role: Mapped[str] = mapped_column(String(50), nullable=False, default="student")
    university_id: Mapped[Optional[uuid.UUID]] = mapped_column(GUID(), ForeignKey("universities.id"))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    university: Mapped[Optional["University"]] = relationship(back_populates="users")


# ──────────────────────────────────────────────────────────────────────────────
# Credentials
# ──────────────────────────────────────────────────────────────────────────────


class University(Base):
    __tablename__ = "universities"

    id: Mapped[uuid.UUID] = mapped_column(GUID(), primary_key=True, default=_genuuid)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    wallet_address: Mapped[Optional[str]] = mapped_column(Text)
    contact_email: Mapped[Optional[str]] = mapped_column(String(255))
    website: Mapped[Optional[str]] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    users: Mapped[list["User"]] = relationship(back_populates="university")
    transcripts: Mapped[list["Transcript"]] = relationship(back_populates="university")
    transactions: Mapped[list["Transaction"]] = relationship(back_populates="university")


class Transcript(Base):
    __tablename__ = "transcripts"
    __table_args__ = (
        Index("ix_transcripts_created_at", "created_at"),
        Index("ix_transcripts_ipfs_hash", "ipfs_hash"),
        Index("ix_transcripts_block_txn", "block_txn"),
        Index("ix_transcripts_qr_code", "qr_code"),
    )

    id: Mapped[uuid.UUID] = mapped_column(GUID(), primary_key=True, default=_genuuid)
    student_id: Mapped[str] = mapped_column(String(255), nullable=False)
    university_id: Mapped[uuid.UUID] = mapped_column(GUID(), ForeignKey("universities.id"), nullable=False)
    student_name: Mapped[str] = mapped_column(Text, nullable=False)
    degree: Mapped[str] = mapped_column(Text, nullable=False)
    issue_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    # Random identifiers assigned at issuance, not content addresses
    ipfs_hash: Mapped[Optional[str]] = mapped_column(String(128))
    block_txn: Mapped[Optional[str]] = mapped_column(String(128))
    qr_code: Mapped[Optional[str]] = mapped_column(String(64))
    verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    university: Mapped["University"] = relationship(back_populates="transcripts")


# ──────────────────────────────────────────────────────────────────────────────
# Financial monitoring
# ──────────────────────────────────────────────────────────────────────────────


class Transaction(Base):
    __tablename__ = "transactions"
    __table_args__ = (
        Index("ix_transactions_timestamp", "timestamp"),
        Index("ix_transactions_type", "type"),
    )

    id: Mapped[uuid.UUID] = mapped_column(GUID(), primary_key=True, default=_genuuid)
    type: Mapped[str] = mapped_column(String(20), nullable=False)  # tuition | grants | fees | services
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    university_id: Mapped[Optional[uuid.UUID]] = mapped_column(GUID(), ForeignKey("universities.id"))
    student_id: Mapped[Optional[str]] = mapped_column(String(255))
    description: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="completed")
    risk_score: Mapped[Decimal] = mapped_column(Numeric(3, 2), nullable=False, default=Decimal("0.00"))
    timestamp: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    university: Mapped[Optional["University"]] = relationship(back_populates="transactions")
    anomalies: Mapped[list["Anomaly"]] = relationship(back_populates="transaction")


class Anomaly(Base):
    __tablename__ = "anomalies"
    __table_args__ = (
        Index("ix_anomalies_timestamp", "timestamp"),
        Index("ix_anomalies_resolved", "resolved"),
        Index("ix_anomalies_transaction_id", "transaction_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(GUID(), primary_key=True, default=_genuuid)
    transaction_id: Mapped[uuid.UUID] = mapped_column(GUID(), ForeignKey("transactions.id"), nullable=False)
    risk_score: Mapped[Decimal] = mapped_column(Numeric(3, 2), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    severity: Mapped[str] = mapped_column(String(10), nullable=False)  # low | medium | high
    resolved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    transaction: Mapped["Transaction"] = relationship(back_populates="anomalies")


# ──────────────────────────────────────────────────────────────────────────────
# Audit
# ──────────────────────────────────────────────────────────────────────────────


class AuditLog(Base):
    """
    Append-only record of every state-changing action.

    NO UPDATE, NO DELETE on this table.
    """

    __tablename__ = "audit_logs"
    __table_args__ = (
        Index("ix_audit_logs_timestamp", "timestamp"),
        Index("ix_audit_logs_event_type", "event_type"),
    )

    id: Mapped[uuid.UUID] = mapped_column(GUID(), primary_key=True, default=_genuuid)
    event_type: Mapped[str] = mapped_column(String(100), nullable=False)
    user_id: Mapped[Optional[str]] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, nullable=False)
    metadata_: Mapped[Optional[dict]] = mapped_column("metadata", JSONType())
    timestamp: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)
