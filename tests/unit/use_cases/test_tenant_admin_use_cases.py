from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.admin import (
    ListTenantClientsUseCase,
    RestoreTenantUseCase,
    SuspendTenantUseCase,
)
from src.domain.entities import Client, ClientType, Tenant
from src.domain.errors import TenantNotFound


@pytest.fixture
def tenant():
    return Tenant(id=uuid4(), name="Acme Legal", subdomain="acme", is_active=True)


@pytest.fixture
def uow(mock_uow, tenant):
    mock_uow.tenants = MagicMock()
    mock_uow.tenants.get_by_id = AsyncMock(return_value=tenant)
    mock_uow.tenants.update = AsyncMock(side_effect=lambda entity: entity)
    mock_uow.clients = MagicMock()
    return mock_uow


@pytest.mark.asyncio
async def test_suspend_tenant(uow, tenant):
    response = await SuspendTenantUseCase(uow).execute(tenant.id, reason="Payment failed")

    assert response.status == "suspended"
    assert response.reason == "Payment failed"
    assert tenant.is_active is False
    assert tenant.suspended_at is not None
    assert tenant.suspended_reason == "Payment failed"
    uow.tenants.update.assert_called_once_with(tenant)
    uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_suspend_twice_keeps_original_timestamp(uow, tenant):
    first = datetime.utcnow() - timedelta(days=3)
    tenant.is_active = False
    tenant.suspended_at = first
    tenant.suspended_reason = "Payment failed"

    response = await SuspendTenantUseCase(uow).execute(tenant.id)

    assert tenant.suspended_at == first
    assert response.suspended_at == first.isoformat()
    assert response.reason == "Payment failed"


@pytest.mark.asyncio
async def test_suspend_unknown_tenant(uow):
    uow.tenants.get_by_id.return_value = None

    with pytest.raises(TenantNotFound):
        await SuspendTenantUseCase(uow).execute(uuid4())

    uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_restore_tenant_clears_suspension(uow, tenant):
    tenant.is_active = False
    tenant.suspended_at = datetime.utcnow()
    tenant.suspended_reason = "Payment failed"

    response = await RestoreTenantUseCase(uow).execute(tenant.id)

    assert response.status == "active"
    assert tenant.is_active is True
    assert tenant.suspended_at is None
    assert tenant.suspended_reason is None
    uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_restore_unknown_tenant(uow):
    uow.tenants.get_by_id.return_value = None

    with pytest.raises(TenantNotFound):
        await RestoreTenantUseCase(uow).execute(uuid4())


@pytest.mark.asyncio
async def test_list_tenant_clients_uses_explicit_scope(uow, tenant):
    pinned = MagicMock()
    pinned.list = AsyncMock(
        return_value=[
            Client(
                id=uuid4(),
                tenant_id=tenant.id,
                client_type=ClientType.individual,
                full_name="Jane Doe",
            )
        ]
    )
    uow.clients.for_tenant = MagicMock(return_value=pinned)

    clients = await ListTenantClientsUseCase(uow).execute(tenant.id, limit=10)

    uow.clients.for_tenant.assert_called_once_with(tenant.id)
    pinned.list.assert_called_once_with(limit=10)
    assert [client.full_name for client in clients] == ["Jane Doe"]
