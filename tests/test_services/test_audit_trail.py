"""
Audit trail tests.
"""

import pytest

from educhain.services.audit_trail import AuditTrailService


class TestAuditTrail:
    @pytest.mark.asyncio
    async def test_record_and_read_back(self, db):
        service = AuditTrailService()
        entry = await service.record(
            db,
            "university_created",
            'University "Gondar University" was created',
            user_id="idp|u1",
            metadata={"universityId": "abc"},
        )
        assert entry.id is not None
        assert entry.timestamp is not None

        entries = await service.recent(db)
        assert len(entries) == 1
        assert entries[0].metadata_ == {"universityId": "abc"}

    @pytest.mark.asyncio
    async def test_metadata_optional(self, db):
        entry = await AuditTrailService().record(db, "contract_deployed", "Deployed")
        assert entry.metadata_ is None
        assert entry.user_id is None

    @pytest.mark.asyncio
    async def test_filter_and_limit(self, db):
        service = AuditTrailService()
        for i in range(5):
            await service.record(db, "transcript_issued", f"Transcript {i}")
        await service.record(db, "anomaly_resolved", "Resolved")

        assert len(await service.recent(db, limit=3)) == 3
        resolved = await service.recent(db, event_type="anomaly_resolved")
        assert [e.event_type for e in resolved] == ["anomaly_resolved"]
