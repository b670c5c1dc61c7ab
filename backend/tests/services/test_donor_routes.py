"""Donor Routes - HTTP-level tests for the donor endpoints.

Tests cover:
    - POST creates (201) and GET returns the same record
    - validation and not-found errors use the structured error envelope
    - PUT partial update, DELETE returns the deleted record
    - feedback / donation-history sub-collections
"""

DONORS = "/api/v1/donors"

PAYLOAD = {"name": "Ada", "email": "ada@example.org", "donor_type": "individual"}


async def _create(client, **overrides):
    res = await client.post(DONORS, json={**PAYLOAD, **overrides})
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_returns_full_record(client):
    donor = await _create(client)
    assert donor["name"] == "Ada"
    assert donor["feedbacks"] == []
    assert donor["donation_history"] == []
    assert donor["created_date"]
    assert donor["updated_at"] is None


async def test_get_after_create(client):
    donor = await _create(client)
    res = await client.get(f"{DONORS}/{donor['id']}")
    assert res.status_code == 200
    assert res.json() == donor


async def test_create_with_empty_field_returns_400(client):
    res = await client.post(DONORS, json={**PAYLOAD, "email": ""})
    assert res.status_code == 400
    body = res.json()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["message"] == "Invalid donor payload"
    assert (await client.get(DONORS)).json() == []


async def test_create_with_missing_field_returns_400(client):
    res = await client.post(DONORS, json={"name": "Ada"})
    assert res.status_code == 400
    assert res.json()["error"]["details"]


async def test_get_unknown_donor_returns_404(client):
    res = await client.get(f"{DONORS}/missing")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["message"] == "Donor with id:missing not found"
    assert error["context"] == {"entity": "Donor", "record_id": "missing"}


async def test_list_returns_all_donors(client):
    await _create(client, name="A")
    await _create(client, name="B")
    res = await client.get(DONORS)
    assert sorted(d["name"] for d in res.json()) == ["A", "B"]


async def test_partial_update(client):
    donor = await _create(client)
    res = await client.put(f"{DONORS}/{donor['id']}", json={"donor_type": "regular"})
    assert res.status_code == 200
    updated = res.json()
    assert updated["donor_type"] == "regular"
    assert updated["name"] == "Ada"
    assert updated["updated_at"] is not None
    assert updated["created_date"] == donor["created_date"]


async def test_update_unknown_donor_returns_404(client):
    res = await client.put(f"{DONORS}/missing", json={"name": "X"})
    assert res.status_code == 404


async def test_delete_returns_record_then_404(client):
    donor = await _create(client)
    res = await client.delete(f"{DONORS}/{donor['id']}")
    assert res.status_code == 200
    assert res.json() == donor
    assert (await client.get(f"{DONORS}/{donor['id']}")).status_code == 404
    again = await client.delete(f"{DONORS}/{donor['id']}")
    assert again.status_code == 404
    assert again.json()["error"]["message"].endswith("could not be deleted")


async def test_feedbacks_round_trip(client):
    donor = await _create(client)
    url = f"{DONORS}/{donor['id']}/feedbacks"
    await client.post(url, json={"feedback": "f1"})
    res = await client.post(url, json={"feedback": "f2"})
    assert res.json()["feedbacks"] == ["f1", "f2"]
    assert res.json()["updated_at"] is None
    assert (await client.get(url)).json() == ["f1", "f2"]


async def test_donation_history_round_trip(client):
    donor = await _create(client)
    url = f"{DONORS}/{donor['id']}/donation-history"
    res = await client.post(url, json={"note": "Gala 2024: 500"})
    assert res.status_code == 200
    assert (await client.get(url)).json() == ["Gala 2024: 500"]


async def test_empty_feedback_returns_400(client):
    donor = await _create(client)
    res = await client.post(f"{DONORS}/{donor['id']}/feedbacks", json={"feedback": ""})
    assert res.status_code == 400
