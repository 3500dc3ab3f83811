"""
Permission API Routes

Permission catalogue of the current tenant and per-user direct grants.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.permissions import permission, require_permissions
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions import (
    CheckUserPermissionsCommand,
    CheckUserPermissionsUseCase,
    CreatePermissionCommand,
    CreatePermissionUseCase,
    GetUserPermissionsUseCase,
    ListPermissionsUseCase,
    PermissionListResponse,
    PermissionResponse,
    SyncUserPermissionsCommand,
    SyncUserPermissionsUseCase,
    UserPermissionCheckResponse,
    UserPermissionsResponse,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/permissions", tags=["Permissions"])


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=PermissionListResponse,
    dependencies=[Depends(require_permissions(permission("permissions", "list")))],
)
async def list_permissions(
    uow: UnitOfWork = Depends(get_unit_of_work),
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    resource: Optional[str] = Query(None),
    action: Optional[str] = Query(None),
):
    use_case = ListPermissionsUseCase(uow)
    return await use_case.execute(page=page, per_page=per_page, resource=resource, action=action)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PermissionResponse,
    dependencies=[Depends(require_permissions(permission("permissions", "create")))],
)
async def create_permission(
    command: CreatePermissionCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Raises:
        - 409 Conflict: PERMISSION_EXISTS
    """
    use_case = CreatePermissionUseCase(uow)
    return await use_case.execute(command)


@router.get(
    "/users/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=UserPermissionsResponse,
    dependencies=[
        Depends(require_permissions(permission("permissions", "read"), resource_id_param="user_id"))
    ],
)
async def get_user_permissions(user_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Roles and effective permissions of a member; 404 MEMBER_NOT_FOUND otherwise"""
    use_case = GetUserPermissionsUseCase(uow)
    return await use_case.execute(user_id)


@router.put(
    "/users/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=UserPermissionsResponse,
    dependencies=[
        Depends(
            require_permissions(permission("permissions", "assign"), resource_id_param="user_id")
        )
    ],
)
async def sync_user_permissions(
    user_id: UUID,
    command: SyncUserPermissionsCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Sync User Permissions

    Replaces the member's direct grants and denials; granted=false denies a
    permission the member's roles would otherwise give. expires_at is optional.

    Raises:
        - 400 Bad Request: DUPLICATE_PERMISSION
        - 404 Not Found: MEMBER_NOT_FOUND, PERMISSION_NOT_FOUND
    """
    use_case = SyncUserPermissionsUseCase(uow)
    return await use_case.execute(user_id, command)


@router.post(
    "/users/{user_id}/check",
    status_code=status.HTTP_200_OK,
    response_model=UserPermissionCheckResponse,
    dependencies=[
        Depends(require_permissions(permission("permissions", "read"), resource_id_param="user_id"))
    ],
)
async def check_user_permissions(
    user_id: UUID,
    command: CheckUserPermissionsCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = CheckUserPermissionsUseCase(uow)
    return await use_case.execute(user_id, command)
