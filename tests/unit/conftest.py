import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.services.tenant_context import TenantContextStore


@pytest.fixture
def tenant_context():
    return TenantContextStore()


@pytest.fixture
def mock_uow(tenant_context):
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.tenant_context = tenant_context
    return uow
