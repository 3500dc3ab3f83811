"""
Tenant API Routes

Current-tenant endpoint (tenant resolved by middleware) and onboarding
endpoints, which run before any tenant exists and are therefore exempt from
tenant resolution.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.permissions import permission, require_permissions
from src.app.services.tenant_context import TenantContextStore
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tenants import (
    CreateTenantCommand,
    CreateTenantResponse,
    CreateTenantUseCase,
    CurrentTenantResponse,
    GetCurrentTenantUseCase,
    ListUserTenantsUseCase,
    TenantInfo,
    TenantListResponse,
    UpdateTenantCommand,
    UpdateTenantUseCase,
)
from src.depends import get_current_user_id, get_tenant_context, get_unit_of_work

router = APIRouter(prefix="/tenants", tags=["Tenant"])
onboarding_router = APIRouter(prefix="/onboarding", tags=["Onboarding"])


@router.get("/current", status_code=status.HTTP_200_OK, response_model=CurrentTenantResponse)
async def get_current_tenant(
    tenant_context: TenantContextStore = Depends(get_tenant_context),
):
    """
    Get Current Tenant

    Returns the tenant resolved for this request and the caller's
    membership in it (null for anonymous callers).

    Raises:
        - 401 Unauthorized: TENANT_REQUIRED
        - 403 Forbidden: TENANT_ACCESS_FORBIDDEN
        - 404 Not Found: TENANT_NOT_FOUND
    """
    use_case = GetCurrentTenantUseCase(tenant_context)
    return await use_case.execute()


@router.patch(
    "/current",
    status_code=status.HTTP_200_OK,
    response_model=TenantInfo,
    dependencies=[Depends(require_permissions(permission("settings", "update")))],
)
async def update_current_tenant(
    command: UpdateTenantCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Current Tenant

    Name, subdomain, custom domain, plan and limits of the resolved tenant.

    Raises:
        - 403 Forbidden: PERMISSION_DENIED without settings.update
        - 409 Conflict: SUBDOMAIN_TAKEN, CUSTOM_DOMAIN_TAKEN
    """
    use_case = UpdateTenantUseCase(uow)
    return await use_case.execute(command)

@onboarding_router.post(
    "/tenants", status_code=status.HTTP_201_CREATED, response_model=CreateTenantResponse
)
async def create_tenant(
    command: CreateTenantCommand,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Tenant

    Onboards a firm with the caller as owner and seeds default permissions
    and roles.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 404 Not Found: USER_NOT_FOUND
        - 409 Conflict: SUBDOMAIN_TAKEN, CUSTOM_DOMAIN_TAKEN
    """
    use_case = CreateTenantUseCase(uow, trial_days=ApplicationConfig.TENANT_TRIAL_DAYS)
    return await use_case.execute(user_id, command)


@onboarding_router.get("/tenants", status_code=status.HTTP_200_OK, response_model=TenantListResponse)
async def list_my_tenants(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List My Tenants

    Active tenants where the caller holds an active membership.
    """
    use_case = ListUserTenantsUseCase(uow)
    return await use_case.execute(user_id)
