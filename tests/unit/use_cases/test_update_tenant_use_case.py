from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.tenant_context import TenantContext
from src.app.use_cases.tenants import UpdateTenantCommand, UpdateTenantUseCase
from src.domain.entities import Tenant, TenantPlan
from src.domain.errors import Conflict, MissingTenantContext


@pytest.fixture
def tenant():
    return Tenant(
        id=uuid4(),
        name="Acme Legal",
        subdomain="acme",
        custom_domain="legal.acme.com",
        plan=TenantPlan.free,
    )


@pytest.fixture
def uow(mock_uow, tenant):
    mock_uow.tenants = MagicMock()
    mock_uow.tenants.get_by_id = AsyncMock(return_value=tenant)
    mock_uow.tenants.get_by_subdomain = AsyncMock(return_value=None)
    mock_uow.tenants.get_by_custom_domain = AsyncMock(return_value=None)
    mock_uow.tenants.update = AsyncMock(side_effect=lambda entity: entity)
    return mock_uow


async def update(uow, tenant_context, tenant, **fields):
    context = TenantContext(tenant_id=tenant.id, user_id=uuid4())
    return await tenant_context.run(
        context, UpdateTenantUseCase(uow).execute, UpdateTenantCommand(**fields)
    )


@pytest.mark.asyncio
async def test_updates_only_given_fields(uow, tenant_context, tenant):
    response = await update(uow, tenant_context, tenant, name="Acme & Partners", plan="pro")

    assert response.name == "Acme & Partners"
    assert response.plan == "pro"
    assert response.subdomain == "acme"
    assert response.custom_domain == "legal.acme.com"
    assert tenant.updated_at is not None
    uow.tenants.get_by_id.assert_called_once_with(tenant.id)
    uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_taken_subdomain_conflicts(uow, tenant_context, tenant):
    uow.tenants.get_by_subdomain.return_value = Tenant(id=uuid4(), name="Other", subdomain="globex")

    with pytest.raises(Conflict) as exc_info:
        await update(uow, tenant_context, tenant, subdomain="globex")

    assert exc_info.value.code == "SUBDOMAIN_TAKEN"
    assert tenant.subdomain == "acme"
    uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_unchanged_subdomain_is_not_checked(uow, tenant_context, tenant):
    await update(uow, tenant_context, tenant, subdomain="acme")

    uow.tenants.get_by_subdomain.assert_not_called()


@pytest.mark.asyncio
async def test_taken_custom_domain_conflicts(uow, tenant_context, tenant):
    uow.tenants.get_by_custom_domain.return_value = Tenant(
        id=uuid4(), name="Other", subdomain="globex", custom_domain="law.example.com"
    )

    with pytest.raises(Conflict) as exc_info:
        await update(uow, tenant_context, tenant, custom_domain="LAW.example.com")

    assert exc_info.value.code == "CUSTOM_DOMAIN_TAKEN"
    uow.tenants.get_by_custom_domain.assert_called_once_with("law.example.com")


@pytest.mark.asyncio
async def test_null_custom_domain_clears_it(uow, tenant_context, tenant):
    response = await update(uow, tenant_context, tenant, custom_domain=None)

    assert response.custom_domain is None
    uow.tenants.get_by_custom_domain.assert_not_called()


@pytest.mark.asyncio
async def test_requires_tenant_context(uow):
    with pytest.raises(MissingTenantContext):
        await UpdateTenantUseCase(uow).execute(UpdateTenantCommand(name="Nobody"))
