"""
Tests for GET /api/dashboard/stats and GET /api/audit-logs.
"""

import pytest


class TestDashboardAPI:
    @pytest.mark.asyncio
    async def test_empty_system(self, client):
        resp = await client.get("/api/dashboard/stats")
        assert resp.status_code == 200
        assert resp.json() == {
            "totalTranscripts": 0,
            "activeUniversities": 0,
            "totalAnomalies": 0,
            "systemRiskScore": 0.0,
        }

    @pytest.mark.asyncio
    async def test_mixed_anomalies_averaged(self, client):
        # Scores 8.5 (x2); the grant and fee raise nothing
        for amount in (12000, 30000):
            await client.post("/api/transactions", json={"type": "tuition", "amount": amount})
        await client.post("/api/transactions", json={"type": "grants", "amount": 500})
        await client.post("/api/transactions", json={"type": "fees", "amount": 20})

        stats = (await client.get("/api/dashboard/stats")).json()
        assert stats["totalAnomalies"] == 2
        assert stats["systemRiskScore"] == 8.5


class TestAuditLogAPI:
    @pytest.mark.asyncio
    async def test_newest_first_with_limit(self, client):
        for name in ("Wollo University", "Debre Markos University", "Axum University"):
            await client.post("/api/universities", json={"name": name})

        logs = (await client.get("/api/audit-logs?limit=2")).json()
        assert len(logs) == 2
        assert logs[0]["timestamp"] >= logs[1]["timestamp"]
        assert all(entry["eventType"] == "university_created" for entry in logs)

    @pytest.mark.asyncio
    async def test_event_type_filter(self, client):
        await client.post("/api/universities", json={"name": "Ambo University"})
        await client.post("/api/transactions", json={"type": "fees", "amount": 10})

        logs = (await client.get("/api/audit-logs?eventType=transaction_recorded")).json()
        assert [entry["eventType"] for entry in logs] == ["transaction_recorded"]

    @pytest.mark.asyncio
    async def test_limit_above_max_is_400(self, client):
        resp = await client.get("/api/audit-logs?limit=501")
        assert resp.status_code == 400
