"""
Tests for the telecalling HTTP API.

Tests validate:
- Draft, preview and direct-create endpoints allocate IDs
- Concurrent drafts over one app get distinct IDs
- Payload validation, including column length limits
- Delete recycles IDs and always succeeds for existing records
- Allocation failures create nothing
- Administrative reset
"""

import asyncio
import uuid

import httpx
from sqlalchemy.exc import OperationalError

from app.config import settings


class TestDraftEndpoint:
    def test_create_draft(self, client, year_prefix):
        response = client.post("/api/telecalling/draft")

        assert response.status_code == 200
        data = response.json()
        assert data["appointmentId"] == f"{year_prefix}-10000001"
        assert data["status"] == "draft"
        assert data["ownerName"] == "New Applicant"
        assert data["model"] == "PENDING"
        assert data["addedBy"] == "Telecaller"

    def test_allocation_failure_returns_500_and_creates_nothing(
        self, client, monkeypatch
    ):
        def broken_claim(_db):
            raise OperationalError("DELETE FROM recycled_ids", {}, Exception("db down"))

        monkeypatch.setattr(
            "app.services.appointment_id_service.claim_id", broken_claim
        )

        response = client.post("/api/telecalling/draft")

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to allocate appointment ID"

        monkeypatch.undo()
        assert client.get("/api/telecalling").json() == []


class TestConcurrentDrafts:
    def test_concurrent_drafts_get_distinct_sequential_ids(self, api_app, year_prefix):
        count = 12

        async def create_drafts():
            transport = httpx.ASGITransport(app=api_app)
            async with httpx.AsyncClient(
                transport=transport, base_url="http://test"
            ) as client:
                return await asyncio.gather(
                    *(client.post("/api/telecalling/draft") for _ in range(count))
                )

        responses = asyncio.run(create_drafts())

        assert [r.status_code for r in responses] == [200] * count
        ids = {r.json()["appointmentId"] for r in responses}
        assert ids == {f"{year_prefix}-{10_000_001 + n}" for n in range(count)}


class TestPreviewEndpoint:
    def test_preview_consumes_counter_value(self, client, year_prefix):
        preview = client.get("/api/telecalling/next-id")

        assert preview.status_code == 200
        assert preview.json() == {"id": f"{year_prefix}-10000001"}

        draft = client.post("/api/telecalling/draft").json()
        assert draft["appointmentId"] == f"{year_prefix}-10000002"

    def test_preview_consumes_recycled_id(self, client, year_prefix):
        draft = client.post("/api/telecalling/draft").json()
        client.delete(f"/api/telecalling/{draft['id']}")

        preview = client.get("/api/telecalling/next-id").json()
        assert preview["id"] == draft["appointmentId"]

        next_draft = client.post("/api/telecalling/draft").json()
        assert next_draft["appointmentId"] == f"{year_prefix}-10000002"


class TestCreateEndpoint:
    def test_create_record(self, client, record_payload, year_prefix):
        response = client.post("/api/telecalling", json=record_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["appointmentId"] == f"{year_prefix}-10000001"
        assert data["status"] == "active"
        assert data["ownerName"] == "Asha Patil"
        assert data["model"] == "Swift"
        assert data["inspectionStatus"] == "Pending"
        assert data["priority"] == "High"

    def test_client_appointment_id_is_ignored(self, client, record_payload, year_prefix):
        record_payload["appointmentId"] = "99-12345"

        data = client.post("/api/telecalling", json=record_payload).json()

        assert data["appointmentId"] == f"{year_prefix}-10000001"

    def test_missing_required_field(self, client, record_payload):
        del record_payload["ownerName"]

        response = client.post("/api/telecalling", json=record_payload)

        assert response.status_code == 422
        assert client.get("/api/telecalling").json() == []

    def test_invalid_email(self, client, record_payload):
        record_payload["emailAddress"] = "not-an-email"

        response = client.post("/api/telecalling", json=record_payload)

        assert response.status_code == 422

    def test_empty_email_allowed(self, client, record_payload):
        record_payload["emailAddress"] = ""

        response = client.post("/api/telecalling", json=record_payload)

        assert response.status_code == 201
        assert response.json()["emailAddress"] is None

    def test_ownership_serial_must_be_positive(self, client, record_payload):
        record_payload["ownershipSerialNumber"] = 0

        response = client.post("/api/telecalling", json=record_payload)

        assert response.status_code == 422

    def test_overlong_field_rejected(self, client, record_payload):
        record_payload["carRegistrationNumber"] = "X" * 33

        response = client.post("/api/telecalling", json=record_payload)

        assert response.status_code == 422
        assert client.get("/api/telecalling").json() == []

    def test_overlong_email_rejected(self, client, record_payload):
        record_payload["emailAddress"] = f"{'a' * 64}@{'b' * 63}.{'c' * 63}.{'d' * 63}.com"

        response = client.post("/api/telecalling", json=record_payload)

        assert response.status_code == 422

    def test_inspection_and_dealer_fields(self, client, record_payload):
        record_payload.update(
            {
                "yearOfManufacture": "2018",
                "odometerReadingInKms": 45210.5,
                "inspectionDateTime": "2026-11-02T10:30:00",
                "inspectionAddress": "12 FC Road, Pune",
                "approvalStatus": "Approved",
                "ncdUcdName": "Sai Motors",
                "repName": "Kiran Joshi",
                "repContact": "9822001122",
                "bankSource": "HDFC",
                "referenceName": "Walk-in",
            }
        )

        created = client.post("/api/telecalling", json=record_payload)
        data = client.get(f"/api/telecalling/{created.json()['id']}").json()

        assert created.status_code == 201
        assert data["yearOfManufacture"] == "2018"
        assert data["odometerReadingInKms"] == 45210.5
        assert data["inspectionDateTime"] == "2026-11-02T10:30:00"
        assert data["inspectionAddress"] == "12 FC Road, Pune"
        assert data["approvalStatus"] == "Approved"
        assert data["ncdUcdName"] == "Sai Motors"
        assert data["repName"] == "Kiran Joshi"
        assert data["repContact"] == "9822001122"
        assert data["bankSource"] == "HDFC"
        assert data["referenceName"] == "Walk-in"

    def test_approval_status_defaults_to_pending(self, client, record_payload):
        data = client.post("/api/telecalling", json=record_payload).json()

        assert data["approvalStatus"] == "Pending"
        assert data["inspectionDateTime"] is None


class TestReadAndUpdateEndpoints:
    def test_list_newest_first(self, client, record_payload):
        first = client.post("/api/telecalling", json=record_payload).json()
        second = client.post("/api/telecalling/draft").json()

        records = client.get("/api/telecalling").json()

        assert [r["id"] for r in records] == [second["id"], first["id"]]

    def test_get_record(self, client, record_payload):
        created = client.post("/api/telecalling", json=record_payload).json()

        response = client.get(f"/api/telecalling/{created['id']}")

        assert response.status_code == 200
        assert response.json()["appointmentId"] == created["appointmentId"]

    def test_get_missing_record(self, client):
        response = client.get(f"/api/telecalling/{uuid.uuid4()}")

        assert response.status_code == 404

    def test_get_invalid_uuid(self, client):
        response = client.get("/api/telecalling/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid Record ID"

    def test_update_completes_draft_and_keeps_id(self, client):
        draft = client.post("/api/telecalling/draft").json()

        response = client.put(
            f"/api/telecalling/{draft['id']}",
            json={"ownerName": "Farah Khan", "model": "Creta", "appointmentId": "00-1"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["ownerName"] == "Farah Khan"
        assert data["model"] == "Creta"
        assert data["status"] == "active"
        assert data["appointmentId"] == draft["appointmentId"]

    def test_update_rejects_overlong_field(self, client, record_payload):
        created = client.post("/api/telecalling", json=record_payload).json()

        response = client.put(
            f"/api/telecalling/{created['id']}", json={"zipCode": "4" * 13}
        )

        assert response.status_code == 422
        stored = client.get(f"/api/telecalling/{created['id']}").json()
        assert stored["zipCode"] is None


class TestDeleteEndpoint:
    def test_delete_recycles_id(self, client, record_payload):
        created = client.post("/api/telecalling", json=record_payload).json()

        response = client.delete(f"/api/telecalling/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {
            "message": "Record deleted successfully",
            "id": created["id"],
            "recycled": True,
        }
        assert client.get(f"/api/telecalling/{created['id']}").status_code == 404

        reused = client.post("/api/telecalling", json=record_payload).json()
        assert reused["appointmentId"] == created["appointmentId"]

    def test_delete_missing_record(self, client):
        response = client.delete(f"/api/telecalling/{uuid.uuid4()}")

        assert response.status_code == 404


class TestResetCounterEndpoint:
    def test_disabled_by_default(self, client, monkeypatch):
        monkeypatch.setattr(settings, "ALLOW_COUNTER_RESET", False)

        response = client.post("/api/admin/reset-counter")

        assert response.status_code == 403

    def test_reset_twice(self, client, monkeypatch, year_prefix):
        monkeypatch.setattr(settings, "ALLOW_COUNTER_RESET", True)
        drafts = [client.post("/api/telecalling/draft").json() for _ in range(3)]
        client.delete(f"/api/telecalling/{drafts[1]['id']}")

        first = client.post("/api/admin/reset-counter")
        second = client.post("/api/admin/reset-counter")

        assert first.status_code == 200
        assert first.json()["discardedIds"] == 1
        assert first.json()["seq"] == 10_000_000
        assert second.json()["discardedIds"] == 0
        assert second.json()["seq"] == 10_000_000

        preview = client.get("/api/telecalling/next-id").json()
        assert preview["id"] == f"{year_prefix}-10000001"


class TestHealth:
    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "ok"}
