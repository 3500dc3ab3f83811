import pytest


@pytest.mark.asyncio
async def test_audit_logs_are_tenant_scoped(client, onboard, test_data):
    _, _, acme_headers = await onboard("acme_tenant", "owner_user")
    _, _, globex_headers = await onboard("globex_tenant", "other_owner_user")
    await client.post("/clients", json=test_data.get("jane_doe_client"), headers=acme_headers)
    await client.get("/clients", headers=globex_headers)

    acme_logs = await client.get(
        "/audit/logs", params={"resource": "clients"}, headers=acme_headers
    )
    globex_logs = await client.get(
        "/audit/logs", params={"resource": "clients"}, headers=globex_headers
    )

    assert [log["action"] for log in acme_logs.json()["logs"]] == ["create"]
    assert [log["action"] for log in globex_logs.json()["logs"]] == ["list"]


@pytest.mark.asyncio
async def test_audit_logs_cursor_pagination(client, onboard):
    _, _, headers = await onboard("acme_tenant", "owner_user")
    for _ in range(3):
        await client.get("/clients", headers=headers)

    first = await client.get(
        "/audit/logs", params={"resource": "clients", "limit": 2}, headers=headers
    )
    assert len(first.json()["logs"]) == 2
    cursor = first.json()["next_cursor"]
    assert cursor is not None

    second = await client.get(
        "/audit/logs",
        params={"resource": "clients", "limit": 2, "cursor": cursor},
        headers=headers,
    )
    assert len(second.json()["logs"]) == 1
    assert second.json()["next_cursor"] is None


@pytest.mark.asyncio
async def test_security_alerts_list_denials(client, onboard, add_member):
    acme, _, owner_headers = await onboard("acme_tenant", "owner_user")
    _, assistant_headers = await add_member(acme["id"], "assistant@acme-legal.com")

    denied = await client.get("/audit/logs", headers=assistant_headers)
    assert denied.status_code == 403

    alerts = await client.get("/audit/security-alerts", headers=owner_headers)

    assert alerts.status_code == 200
    assert [(a["resource"], a["action"]) for a in alerts.json()] == [("audit", "list")]
