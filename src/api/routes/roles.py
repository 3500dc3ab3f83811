"""
Role API Routes

Roles of the current tenant, their permission sets and user assignments.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.permissions import permission, require_permissions
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions import (
    AssignRolesCommand,
    RoleListResponse,
    RolePermissionsCommand,
    RoleResponse,
    SyncRolePermissionsUseCase,
    UserPermissionsResponse,
)
from src.app.use_cases.roles import AssignRolesUseCase, ListRolesUseCase
from src.depends import get_unit_of_work

router = APIRouter(prefix="/roles", tags=["Roles"])


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=RoleListResponse,
    dependencies=[Depends(require_permissions(permission("roles", "list")))],
)
async def list_roles(
    uow: UnitOfWork = Depends(get_unit_of_work),
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
):
    use_case = ListRolesUseCase(uow)
    return await use_case.execute(page=page, per_page=per_page)


@router.post(
    "/assign",
    status_code=status.HTTP_200_OK,
    response_model=UserPermissionsResponse,
    dependencies=[Depends(require_permissions(permission("roles", "assign")))],
)
async def assign_roles(command: AssignRolesCommand, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Assign Roles

    Raises:
        - 404 Not Found: MEMBER_NOT_FOUND, ROLE_NOT_FOUND
        - 409 Conflict: ROLE_ALREADY_ASSIGNED
    """
    use_case = AssignRolesUseCase(uow)
    return await use_case.execute(command)


@router.put(
    "/{role_id}/permissions",
    status_code=status.HTTP_200_OK,
    response_model=RoleResponse,
    dependencies=[
        Depends(require_permissions(permission("permissions", "assign"), resource_id_param="role_id"))
    ],
)
async def sync_role_permissions(
    role_id: UUID,
    command: RolePermissionsCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Sync Role Permissions

    The role ends up with exactly the given permissions.

    Raises:
        - 404 Not Found: ROLE_NOT_FOUND, PERMISSION_NOT_FOUND (also for other tenants' ids)
    """
    use_case = SyncRolePermissionsUseCase(uow)
    return await use_case.execute(role_id, command.permission_ids)


@router.post(
    "/{role_id}/permissions/attach",
    status_code=status.HTTP_200_OK,
    response_model=RoleResponse,
    dependencies=[
        Depends(require_permissions(permission("permissions", "assign"), resource_id_param="role_id"))
    ],
)
async def attach_role_permissions(
    role_id: UUID,
    command: RolePermissionsCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = SyncRolePermissionsUseCase(uow)
    return await use_case.attach(role_id, command.permission_ids)


@router.post(
    "/{role_id}/permissions/detach",
    status_code=status.HTTP_200_OK,
    response_model=RoleResponse,
    dependencies=[
        Depends(require_permissions(permission("permissions", "revoke"), resource_id_param="role_id"))
    ],
)
async def detach_role_permissions(
    role_id: UUID,
    command: RolePermissionsCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = SyncRolePermissionsUseCase(uow)
    return await use_case.detach(role_id, command.permission_ids)
