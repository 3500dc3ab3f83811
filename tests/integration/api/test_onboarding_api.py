import pytest

from src.app.use_cases.permissions.defaults import DEFAULT_PERMISSIONS


@pytest.mark.asyncio
async def test_health_needs_no_tenant(client):
    response = await client.get("/health")

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_onboarding_creates_tenant_with_owner(client, make_user, test_data):
    _, headers = await make_user("owner@acme-legal.com", "Olivia Owner")

    response = await client.post(
        "/onboarding/tenants", json=test_data.get("acme_tenant"), headers=headers
    )

    assert response.status_code == 201, response.text
    body = response.json()
    assert body["tenant"]["subdomain"] == "acme"
    assert body["tenant"]["plan"] == "pro"
    assert body["tenant"]["is_active"] is True
    assert body["tenant"]["trial_ends_at"] is not None
    assert body["membership"]["role"] == "owner"
    assert body["roles"] == ["admin", "assistant", "lawyer", "owner"]
    assert body["permissions_seeded"] == len(DEFAULT_PERMISSIONS)


@pytest.mark.asyncio
async def test_onboarding_requires_authentication(client, test_data):
    response = await client.post("/onboarding/tenants", json=test_data.get("acme_tenant"))

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


@pytest.mark.asyncio
async def test_duplicate_subdomain_is_rejected(client, onboard, make_user, test_data):
    await onboard("acme_tenant", "owner_user")
    _, headers = await make_user("someone@else.com")

    response = await client.post(
        "/onboarding/tenants",
        json=test_data.get("acme_tenant", name="Acme Again"),
        headers=headers,
    )

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "SUBDOMAIN_TAKEN"


@pytest.mark.asyncio
async def test_invalid_subdomain_is_rejected(client, make_user, test_data):
    _, headers = await make_user("owner@acme-legal.com")

    response = await client.post(
        "/onboarding/tenants",
        json=test_data.get("acme_tenant", subdomain="Not A Label"),
        headers=headers,
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_my_tenants(client, onboard):
    acme, user, headers = await onboard("acme_tenant", "owner_user")
    await onboard("globex_tenant", "other_owner_user")

    response = await client.get("/onboarding/tenants", headers=headers)

    assert response.status_code == 200
    assert [tenant["id"] for tenant in response.json()["tenants"]] == [acme["id"]]
