"""
Public verify-by-hash lookups.

Two modes, selected by ``settings.verify_by_hash_lookup``:

- mock (default): every non-empty hash verifies against a fixed sample
  record. Storage is never consulted, so a positive answer proves nothing.
- lookup: the hash is matched against the identifiers stored on transcripts
  (ipfsHash, blockTxn, qrCode) and the stored verified flag is reported.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.config import settings
from educhain.db.repositories.transcript import transcript_repo
from educhain.db.repositories.university import university_repo
from educhain.schemas.transcript import HashVerificationResult

logger = structlog.get_logger(__name__)

SAMPLE_RECORD = {
    "student": "John Smith",
    "university": "MIT",
    "degree": "B.S. Computer Science",
    "issue_date": "May 2023",
}


class TranscriptVerifier:
    def __init__(self, lookup: bool | None = None):
        self.lookup = settings.verify_by_hash_lookup if lookup is None else lookup

    async def verify(self, session: AsyncSession, value: str) -> HashVerificationResult:
        if not self.lookup:
            logger.info("hash_verification_mocked")
            return HashVerificationResult(verified=True, transaction_hash=value, **SAMPLE_RECORD)

        transcript = await transcript_repo.find_by_hash(session, value)
        if transcript is None:
            logger.info("hash_verification_miss")
            return HashVerificationResult(verified=False, found=False, transaction_hash=value)

        university = await university_repo.get_by_id(session, transcript.university_id)
        logger.info(
            "hash_verification_hit",
            transcript_id=str(transcript.id),
            verified=transcript.verified,
        )
        return HashVerificationResult(
            verified=transcript.verified,
            found=True,
            transcript_id=transcript.id,
            student=transcript.student_name,
            university=university.name if university else None,
            degree=transcript.degree,
            issue_date=transcript.issue_date.strftime("%B %Y"),
            transaction_hash=transcript.block_txn or value,
        )
