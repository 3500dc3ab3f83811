from uuid import uuid4

import pytest


@pytest.mark.asyncio
async def test_client_crud(client, onboard, test_data):
    acme, _, headers = await onboard("acme_tenant", "owner_user")

    created = await client.post("/clients", json=test_data.get("jane_doe_client"), headers=headers)
    assert created.status_code == 201, created.text
    client_id = created.json()["id"]
    assert created.json()["tenant_id"] == acme["id"]
    assert created.json()["display_name"] == "Jane Doe"

    fetched = await client.get(f"/clients/{client_id}", headers=headers)
    assert fetched.status_code == 200
    assert fetched.json()["email"] == "jane.doe@example.com"

    updated = await client.patch(
        f"/clients/{client_id}", json={"phone": "+1 555 0199"}, headers=headers
    )
    assert updated.status_code == 200
    assert updated.json()["phone"] == "+1 555 0199"
    assert updated.json()["full_name"] == "Jane Doe"

    deleted = await client.delete(f"/clients/{client_id}", headers=headers)
    assert deleted.status_code == 204

    missing = await client.get(f"/clients/{client_id}", headers=headers)
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "CLIENT_NOT_FOUND"

    actions = await client.get(
        "/audit/logs", params={"resource": "clients", "action": "deleted"}, headers=headers
    )
    assert [log["resource_id"] for log in actions.json()["logs"]] == [client_id]


@pytest.mark.asyncio
async def test_clients_with_same_name_are_isolated(client, onboard, test_data):
    _, _, acme_headers = await onboard("acme_tenant", "owner_user")
    _, _, globex_headers = await onboard("globex_tenant", "other_owner_user")

    acme_jane = await client.post(
        "/clients", json=test_data.get("jane_doe_client"), headers=acme_headers
    )
    globex_jane = await client.post(
        "/clients", json=test_data.get("jane_doe_client"), headers=globex_headers
    )
    assert acme_jane.status_code == globex_jane.status_code == 201

    acme_list = await client.get("/clients", headers=acme_headers)
    assert acme_list.json()["total"] == 1
    assert [c["id"] for c in acme_list.json()["clients"]] == [acme_jane.json()["id"]]

    searched = await client.get("/clients", params={"search": "jane"}, headers=globex_headers)
    assert [c["id"] for c in searched.json()["clients"]] == [globex_jane.json()["id"]]

    # Another tenant's record is simply not there
    foreign_id = globex_jane.json()["id"]
    assert (await client.get(f"/clients/{foreign_id}", headers=acme_headers)).status_code == 404
    assert (
        await client.patch(f"/clients/{foreign_id}", json={"phone": "x"}, headers=acme_headers)
    ).status_code == 404
    assert (await client.delete(f"/clients/{foreign_id}", headers=acme_headers)).status_code == 404

    still_there = await client.get(f"/clients/{foreign_id}", headers=globex_headers)
    assert still_there.status_code == 200
    assert still_there.json()["phone"] == test_data.get("jane_doe_client")["phone"]


@pytest.mark.asyncio
async def test_create_client_validation(client, onboard):
    _, _, headers = await onboard("acme_tenant", "owner_user")

    response = await client.post(
        "/clients", json={"client_type": "individual"}, headers=headers
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_clients_require_authentication(client, onboard):
    acme, _, _ = await onboard("acme_tenant", "owner_user")

    response = await client.get("/clients", headers={"Host": "acme.localhost"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_case_for_client_of_own_tenant(client, onboard, test_data):
    _, user, headers = await onboard("acme_tenant", "owner_user")
    jane = await client.post("/clients", json=test_data.get("jane_doe_client"), headers=headers)

    created = await client.post(
        "/cases",
        json=test_data.get("labor_case", client_id=jane.json()["id"]),
        headers=headers,
    )

    assert created.status_code == 201, created.text
    case = created.json()
    assert case["client_id"] == jane.json()["id"]
    assert case["status"] == "active"
    assert case["priority"] == "high"

    fetched = await client.get(f"/cases/{case['id']}", headers=headers)
    assert fetched.status_code == 200
    assert fetched.json()["title"] == case["title"]
    assert [event["title"] for event in fetched.json()["timeline"]] == ["Case opened"]
    assert fetched.json()["documents"] == []

    listed = await client.get(
        "/cases", params={"client_id": jane.json()["id"]}, headers=headers
    )
    assert [c["id"] for c in listed.json()["cases"]] == [case["id"]]


@pytest.mark.asyncio
async def test_case_for_foreign_client_is_rejected(client, onboard, test_data):
    _, _, acme_headers = await onboard("acme_tenant", "owner_user")
    _, _, globex_headers = await onboard("globex_tenant", "other_owner_user")
    globex_jane = await client.post(
        "/clients", json=test_data.get("jane_doe_client"), headers=globex_headers
    )

    response = await client.post(
        "/cases",
        json=test_data.get("labor_case", client_id=globex_jane.json()["id"]),
        headers=acme_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "CLIENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_unknown_case(client, onboard):
    _, _, headers = await onboard("acme_tenant", "owner_user")

    response = await client.get(f"/cases/{uuid4()}", headers=headers)

    assert response.status_code == 404
