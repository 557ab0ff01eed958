"""
Audit Trail Service.

Append-only log of state-changing actions. Entries are written inside the
caller's session, so they commit together with the change they describe.
"""

from typing import Optional, Sequence

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.db.models import AuditLog
from educhain.db.repositories.audit_log import audit_log_repo

logger = structlog.get_logger(__name__)


class AuditTrailService:
    """Thin wrapper over the audit log repository that also emits a log line."""

    async def record(
        self,
        session: AsyncSession,
        event_type: str,
        description: str,
        *,
        user_id: Optional[str] = None,
        metadata: Optional[dict] = None,
    ) -> AuditLog:
        """
        Append one audit entry.

        Event types in use: university_created, university_verified,
        transcript_issued, transcript_verified, transaction_recorded,
        anomaly_resolved, blockchain_register_student,
        blockchain_issue_transcript, contract_deployed.
        """
        entry = await audit_log_repo.append(
            session,
            event_type=event_type,
            description=description,
            user_id=user_id,
            metadata=metadata,
        )
        logger.info("audit_logged", event_type=event_type, user_id=user_id)
        return entry

    async def recent(
        self,
        session: AsyncSession,
        limit: int = 100,
        event_type: Optional[str] = None,
    ) -> Sequence[AuditLog]:
        return await audit_log_repo.recent(session, limit=limit, event_type=event_type)


_audit_service = AuditTrailService()


def get_audit_service() -> AuditTrailService:
    """Get the shared audit service."""
    return _audit_service
