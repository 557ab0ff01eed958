"""
Transaction recording.

Scores every new transaction and raises at most one anomaly for it. There is
no dedup key: retrying the same submission records a second transaction and,
if it qualifies, a second anomaly.
"""

from dataclasses import dataclass
from typing import Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.db.models import Anomaly, Transaction
from educhain.db.repositories.anomaly import anomaly_repo
from educhain.db.repositories.transaction import transaction_repo
from educhain.db.repositories.university import university_repo
from educhain.exceptions import NotFoundError
from educhain.schemas.transaction import TransactionCreate
from educhain.services.audit_trail import AuditTrailService, get_audit_service
from educhain.services.risk_scoring import assess_transaction

logger = structlog.get_logger(__name__)


@dataclass
class RecordedTransaction:
    transaction: Transaction
    anomaly: Optional[Anomaly] = None


class TransactionService:
    def __init__(self, audit: AuditTrailService | None = None):
        self.audit = audit or get_audit_service()

    async def record(
        self,
        session: AsyncSession,
        data: TransactionCreate,
        user_id: Optional[str] = None,
    ) -> RecordedTransaction:
        if data.university_id is not None:
            if await university_repo.get_by_id(session, data.university_id) is None:
                raise NotFoundError("Failed to create transaction")

        assessment = assess_transaction(data.amount, data.type)
        transaction = await transaction_repo.create(session, data, risk_score=assessment.score)

        anomaly = None
        if assessment.is_anomalous:
            anomaly = await anomaly_repo.add(
                session,
                transaction_id=transaction.id,
                risk_score=assessment.score,
                description=f"High-risk {data.type} transaction detected",
                severity=assessment.severity,
            )
            logger.warning(
                "anomaly_detected",
                transaction_id=str(transaction.id),
                anomaly_id=str(anomaly.id),
                risk_score=float(assessment.score),
                severity=assessment.severity,
            )

        metadata = {"transactionId": str(transaction.id), "riskScore": str(assessment.score)}
        if anomaly is not None:
            metadata["anomalyId"] = str(anomaly.id)
        await self.audit.record(
            session,
            "transaction_recorded",
            f"{data.type.capitalize()} transaction of {data.amount} {data.currency} recorded",
            user_id=user_id,
            metadata=metadata,
        )
        return RecordedTransaction(transaction=transaction, anomaly=anomaly)
