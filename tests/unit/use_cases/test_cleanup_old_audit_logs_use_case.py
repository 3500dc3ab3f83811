from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.audit import CleanupOldAuditLogsUseCase


@pytest.fixture
def scoped_view():
    view = MagicMock()
    view.delete_older_than = AsyncMock(return_value=3)
    return view


@pytest.fixture
def uow(mock_uow, scoped_view):
    mock_uow.audit_logs = MagicMock()
    mock_uow.audit_logs.for_tenant = MagicMock(return_value=scoped_view)
    mock_uow.audit_logs.without_tenant_scope = MagicMock(return_value=scoped_view)
    return mock_uow


@pytest.mark.asyncio
async def test_cleanup_single_tenant(uow, scoped_view):
    tenant_id = uuid4()

    response = await CleanupOldAuditLogsUseCase(uow).execute(90, tenant_id=tenant_id)

    uow.audit_logs.for_tenant.assert_called_once_with(tenant_id)
    uow.audit_logs.without_tenant_scope.assert_not_called()
    assert response.deleted == 3
    assert response.tenant_id == str(tenant_id)
    uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_cleanup_all_tenants(uow, scoped_view):
    before = datetime.utcnow()

    response = await CleanupOldAuditLogsUseCase(uow).execute(30)

    uow.audit_logs.without_tenant_scope.assert_called_once()
    uow.audit_logs.for_tenant.assert_not_called()
    cutoff = scoped_view.delete_older_than.call_args.args[0]
    assert before - timedelta(days=30, seconds=5) < cutoff <= datetime.utcnow() - timedelta(days=30)
    assert response.tenant_id is None
