from datetime import datetime, timedelta
from uuid import UUID, uuid4

import pytest

from config import ApplicationConfig
from src.domain.entities import AuditLog, AuditResult

ADMIN_HEADERS = {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


@pytest.mark.asyncio
async def test_admin_endpoints_require_api_key(client, onboard):
    acme, _, _ = await onboard("acme_tenant", "owner_user")

    missing = await client.post(f"/admin/tenants/{acme['id']}/suspend")
    wrong = await client.post(
        f"/admin/tenants/{acme['id']}/suspend", headers={"X-Admin-API-Key": "nope"}
    )

    assert missing.status_code == 401
    assert missing.json()["error"]["code"] == "UNAUTHORIZED"
    assert wrong.status_code == 401
    assert wrong.json()["error"]["code"] == "INVALID_API_KEY"


@pytest.mark.asyncio
async def test_suspended_tenant_stops_resolving(client, onboard):
    acme, _, headers = await onboard("acme_tenant", "owner_user")

    suspended = await client.post(
        f"/admin/tenants/{acme['id']}/suspend",
        json={"reason": "Payment failed"},
        headers=ADMIN_HEADERS,
    )
    assert suspended.status_code == 200, suspended.text
    assert suspended.json()["status"] == "suspended"
    assert suspended.json()["reason"] == "Payment failed"

    blocked = await client.get("/tenants/current", headers=headers)
    assert blocked.status_code == 404
    assert blocked.json()["error"]["code"] == "TENANT_NOT_FOUND"

    by_subdomain = await client.get("/tenants/current", headers={"Host": "acme.localhost"})
    assert by_subdomain.status_code == 404

    restored = await client.post(f"/admin/tenants/{acme['id']}/restore", headers=ADMIN_HEADERS)
    assert restored.status_code == 200
    assert restored.json()["status"] == "active"

    current = await client.get("/tenants/current", headers=headers)
    assert current.status_code == 200
    assert current.json()["tenant"]["suspended_at"] is None


@pytest.mark.asyncio
async def test_suspend_unknown_tenant(client):
    response = await client.post(f"/admin/tenants/{uuid4()}/suspend", headers=ADMIN_HEADERS)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_list_clients_of_any_tenant(client, onboard, test_data):
    _, _, acme_headers = await onboard("acme_tenant", "owner_user")
    globex, _, globex_headers = await onboard("globex_tenant", "other_owner_user")
    await client.post("/clients", json=test_data.get("jane_doe_client"), headers=acme_headers)
    await client.post("/clients", json=test_data.get("company_client"), headers=globex_headers)

    response = await client.get(f"/admin/tenants/{globex['id']}/clients", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert [c["display_name"] for c in response.json()] == ["Initech LLC"]


@pytest.mark.asyncio
async def test_audit_cleanup(client, onboard, db_session):
    acme, _, _ = await onboard("acme_tenant", "owner_user")
    globex, _, _ = await onboard("globex_tenant", "other_owner_user")
    old = datetime.utcnow() - timedelta(days=200)
    for tenant in (acme, globex):
        db_session.add(
            AuditLog(
                tenant_id=UUID(tenant["id"]),
                resource="clients",
                action="read",
                result=AuditResult.granted,
                created_at=old,
            )
        )
    await db_session.commit()

    single = await client.post(
        "/admin/audit/cleanup",
        params={"older_than_days": 90, "tenant_id": acme["id"]},
        headers=ADMIN_HEADERS,
    )
    assert single.status_code == 200, single.text
    assert single.json()["deleted"] == 1
    assert single.json()["tenant_id"] == acme["id"]

    everywhere = await client.post(
        "/admin/audit/cleanup", params={"older_than_days": 90}, headers=ADMIN_HEADERS
    )
    assert everywhere.json()["deleted"] == 1
    assert everywhere.json()["tenant_id"] is None
