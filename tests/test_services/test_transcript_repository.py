"""
Transcript issuance identifiers, shared by the API and the seed script.
"""

import uuid
from datetime import datetime

import pytest

from educhain.db.repositories.transcript import issuance_identifiers, transcript_repo
from educhain.schemas.transcript import TranscriptCreate
from tests.conftest import create_university


class TestIssuanceIdentifiers:
    def test_shape(self):
        ids = issuance_identifiers()
        assert set(ids) == {"qr_code", "ipfs_hash", "block_txn"}
        uuid.UUID(ids["qr_code"])
        assert ids["ipfs_hash"].startswith("Qm") and len(ids["ipfs_hash"]) == 34
        assert ids["block_txn"].startswith("0x") and len(ids["block_txn"]) == 34

    def test_fresh_each_call(self):
        assert issuance_identifiers() != issuance_identifiers()


class TestIssue:
    @pytest.mark.asyncio
    async def test_issue_stores_identifiers_unverified(self, db):
        university = await create_university(db)
        transcript = await transcript_repo.issue(
            db,
            TranscriptCreate(
                student_id="STU-9",
                university_id=university.id,
                student_name="Tigist Alemayehu",
                degree="M.Sc. Public Health",
                issue_date=datetime(2023, 5, 20),
            ),
        )
        assert transcript.verified is False
        assert transcript.ipfs_hash.startswith("Qm")
        assert transcript.block_txn.startswith("0x")
        assert await transcript_repo.find_by_hash(db, transcript.qr_code) is not None
