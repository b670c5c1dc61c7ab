"""Donation Routes - HTTP-level tests for donation CRUD and totals."""

from donorbase.api.dependencies import get_donation_registry
from donorbase.main import app
from donorbase.services.donation_registry import DonationRegistry

DONATIONS = "/api/v1/donations"


async def _create(client, amount=100, donor_id="d-1", campaign_id=1, date="2024-01-01"):
    res = await client.post(DONATIONS, json={
        "amount": amount, "date": date, "donorId": donor_id, "campaignId": campaign_id,
    })
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_uses_camel_case_references(client):
    donation = await _create(client, donor_id="d-7", campaign_id=3)
    assert donation["donorId"] == "d-7"
    assert donation["campaignId"] == 3
    assert donation["updated_at"] is None


async def test_get_after_create(client):
    donation = await _create(client)
    res = await client.get(f"{DONATIONS}/{donation['id']}")
    assert res.status_code == 200
    assert res.json() == donation


async def test_create_with_zero_amount_returns_400(client):
    res = await client.post(DONATIONS, json={
        "amount": 0, "date": "2024-01-01", "donorId": "d-1", "campaignId": 1,
    })
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid donation payload"


async def test_update_keeps_amount_when_zero(client):
    donation = await _create(client, amount=100)
    res = await client.put(f"{DONATIONS}/{donation['id']}", json={"amount": 0, "campaignId": 9})
    assert res.status_code == 200
    assert res.json()["amount"] == 100
    assert res.json()["campaignId"] == 9
    assert res.json()["updated_at"] is not None


async def test_delete_then_get_returns_404(client):
    donation = await _create(client)
    assert (await client.delete(f"{DONATIONS}/{donation['id']}")).status_code == 200
    res = await client.get(f"{DONATIONS}/{donation['id']}")
    assert res.status_code == 404
    assert res.json()["error"]["message"] == f"Donation with id:{donation['id']} not found"


async def test_list_donations(client):
    await _create(client)
    await _create(client)
    assert len((await client.get(DONATIONS)).json()) == 2


async def test_total_donation(client):
    assert (await client.get(f"{DONATIONS}/total")).json() == {"total": 0}
    for amount in (100, 250, 50):
        await _create(client, amount=amount)
    assert (await client.get(f"{DONATIONS}/total")).json() == {"total": 400}


async def test_total_for_donor(client):
    await _create(client, amount=100, donor_id="X")
    await _create(client, amount=250, donor_id="Y")
    await _create(client, amount=50, donor_id="X")
    res = await client.get(f"{DONATIONS}/total/X")
    assert res.json() == {"donorId": "X", "total": 150}
    unknown = await client.get(f"{DONATIONS}/total/nobody")
    assert unknown.status_code == 200
    assert unknown.json()["total"] == 0


async def test_deleting_donor_keeps_donations(client):
    donor = (await client.post("/api/v1/donors", json={
        "name": "Ada", "email": "ada@example.org", "donor_type": "corporate",
    })).json()
    await _create(client, amount=30, donor_id=donor["id"])
    await client.delete(f"/api/v1/donors/{donor['id']}")
    res = await client.get(f"{DONATIONS}/total/{donor['id']}")
    assert res.json()["total"] == 30


class _ReadOnlyStore:
    """KeyValueStore whose writes always fail."""

    async def get(self, key):
        return None

    async def insert(self, key, value):
        raise RuntimeError("store is read-only")

    async def remove(self, key):
        return None

    async def values(self):
        return []


async def test_failed_create_returns_operation_failed(client):
    app.dependency_overrides[get_donation_registry] = lambda: DonationRegistry(_ReadOnlyStore())
    res = await client.post(DONATIONS, json={
        "amount": 10, "date": "2024-01-01", "donorId": "d-1", "campaignId": 1,
    })
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "OPERATION_FAILED"
    assert error["message"] == "Donation creation unsuccessful"
    assert error["context"]["entity"] == "Donation"


async def test_update_with_whitespace_date_returns_400(client):
    donation = await _create(client)
    res = await client.put(f"{DONATIONS}/{donation['id']}", json={"date": "   "})
    assert res.status_code == 400
    assert res.json()["error"]["message"] == "Invalid donation payload"
