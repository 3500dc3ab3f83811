import pytest


@pytest.mark.asyncio
async def test_owner_updates_current_tenant(client, onboard):
    acme, _, headers = await onboard("acme_tenant", "owner_user")

    response = await client.patch(
        "/tenants/current",
        json={"name": "Acme Legal LLP", "custom_domain": "Legal.Acme.example", "plan": "enterprise"},
        headers=headers,
    )

    assert response.status_code == 200, response.text
    body = response.json()
    assert body["id"] == acme["id"]
    assert body["name"] == "Acme Legal LLP"
    assert body["subdomain"] == "acme"
    assert body["custom_domain"] == "legal.acme.example"
    assert body["plan"] == "enterprise"

    current = await client.get("/tenants/current", headers=headers)
    assert current.json()["tenant"]["name"] == "Acme Legal LLP"


@pytest.mark.asyncio
async def test_subdomain_of_other_tenant_is_taken(client, onboard):
    _, _, acme_headers = await onboard("acme_tenant", "owner_user")
    await onboard("globex_tenant", "other_owner_user")

    response = await client.patch(
        "/tenants/current", json={"subdomain": "globex"}, headers=acme_headers
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "SUBDOMAIN_TAKEN"


@pytest.mark.asyncio
async def test_assistant_cannot_update_tenant(client, onboard, add_member):
    acme, _, _ = await onboard("acme_tenant", "owner_user")
    _, assistant_headers = await add_member(acme["id"], "assistant@acme-legal.com")

    response = await client.patch(
        "/tenants/current", json={"name": "Taken Over"}, headers=assistant_headers
    )

    assert response.status_code == 403
    assert response.json()["error"]["required_permissions"] == ["settings.update"]


@pytest.mark.asyncio
async def test_dashboard_without_deadlines_or_timer(client, onboard):
    _, _, headers = await onboard("acme_tenant", "owner_user")

    response = await client.get("/dashboard", params={"days": 14}, headers=headers)

    assert response.status_code == 200, response.text
    assert response.json() == {"upcoming_deadlines": [], "running_timer": None}


@pytest.mark.asyncio
async def test_user_audit_logs_only_show_that_user(client, onboard, add_member):
    acme, owner, owner_headers = await onboard("acme_tenant", "owner_user")
    assistant, assistant_headers = await add_member(acme["id"], "assistant@acme-legal.com")
    await client.get("/clients", headers=assistant_headers)
    await client.delete(
        "/clients/00000000-0000-0000-0000-000000000000", headers=assistant_headers
    )
    await client.get("/clients", headers=owner_headers)

    response = await client.get(f"/audit/users/{assistant.id}/logs", headers=owner_headers)

    assert response.status_code == 200, response.text
    logs = response.json()
    assert {log["user_id"] for log in logs} == {str(assistant.id)}
    assert sorted((log["action"], log["result"]) for log in logs) == [
        ("delete", "denied"),
        ("list", "granted"),
    ]
    assert str(owner.id) not in {log["user_id"] for log in logs}
