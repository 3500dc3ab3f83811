"""
Admin API Routes - System Administration Endpoints

These endpoints are for internal service integrations (billing, support
tooling). Authentication is via Admin API Key, not user JWTs, and they run
outside tenant resolution: cross-tenant access goes through the explicit
for_tenant / without_tenant_scope repository paths.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    ListTenantClientsUseCase,
    RestoreTenantResponse,
    RestoreTenantUseCase,
    SuspendTenantResponse,
    SuspendTenantUseCase,
)
from src.app.use_cases.audit import CleanupOldAuditLogsUseCase
from src.app.use_cases.audit.dtos import CleanupResponse
from src.app.use_cases.clients import ClientResponse
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


class SuspendTenantRequest(BaseModel):
    reason: Optional[str] = Field(default=None, max_length=500)


@router.post(
    "/tenants/{tenant_id}/suspend",
    status_code=status.HTTP_200_OK,
    response_model=SuspendTenantResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def suspend_tenant(
    tenant_id: UUID,
    request: Optional[SuspendTenantRequest] = None,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Suspend Tenant

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: TENANT_NOT_FOUND
    """
    use_case = SuspendTenantUseCase(uow)
    return await use_case.execute(tenant_id, reason=request.reason if request else None)


@router.post(
    "/tenants/{tenant_id}/restore",
    status_code=status.HTTP_200_OK,
    response_model=RestoreTenantResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def restore_tenant(
    tenant_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Restore Tenant

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 404 Not Found: TENANT_NOT_FOUND
    """
    use_case = RestoreTenantUseCase(uow)
    return await use_case.execute(tenant_id)


@router.get(
    "/tenants/{tenant_id}/clients",
    status_code=status.HTTP_200_OK,
    response_model=List[ClientResponse],
    dependencies=[Depends(verify_admin_api_key)],
)
async def list_tenant_clients(
    tenant_id: UUID,
    limit: int = Query(100, ge=1, le=500),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List another tenant's clients (support tooling).

    Requires: X-Admin-API-Key header
    """
    use_case = ListTenantClientsUseCase(uow)
    return await use_case.execute(tenant_id, limit=limit)


@router.post(
    "/audit/cleanup",
    status_code=status.HTTP_200_OK,
    response_model=CleanupResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def cleanup_audit_logs(
    older_than_days: int = Query(ApplicationConfig.AUDIT_RETENTION_DAYS, ge=1),
    tenant_id: Optional[UUID] = Query(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete audit logs older than the retention horizon, for one tenant or
    for all of them.

    Requires: X-Admin-API-Key header
    """
    use_case = CleanupOldAuditLogsUseCase(uow)
    return await use_case.execute(older_than_days, tenant_id=tenant_id)
