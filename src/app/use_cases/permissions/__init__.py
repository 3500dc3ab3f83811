"""Permission and role use cases."""

from .check_permission_use_case import CheckPermissionUseCase
from .check_user_permissions_use_case import CheckUserPermissionsUseCase
from .create_default_roles_use_case import CreateDefaultRolesUseCase
from .create_permission_use_case import CreatePermissionUseCase
from .dtos import (
    AssignRolesCommand,
    CheckUserPermissionsCommand,
    CreatePermissionCommand,
    PermissionCheckResult,
    PermissionListResponse,
    PermissionResponse,
    RequiredPermission,
    RoleListResponse,
    RolePermissionsCommand,
    RoleResponse,
    SyncUserPermissionsCommand,
    UserPermissionCheckResponse,
    UserPermissionGrant,
    UserPermissionsResponse,
)
from .get_user_permissions_use_case import GetUserPermissionsUseCase
from .list_permissions_use_case import ListPermissionsUseCase
from .sync_default_permissions_use_case import SyncDefaultPermissionsUseCase
from .sync_role_permissions_use_case import SyncRolePermissionsUseCase
from .sync_user_permissions_use_case import SyncUserPermissionsUseCase

__all__ = [
    "CheckPermissionUseCase",
    "CheckUserPermissionsUseCase",
    "CreateDefaultRolesUseCase",
    "CreatePermissionUseCase",
    "GetUserPermissionsUseCase",
    "ListPermissionsUseCase",
    "SyncDefaultPermissionsUseCase",
    "SyncRolePermissionsUseCase",
    "SyncUserPermissionsUseCase",
    "AssignRolesCommand",
    "CheckUserPermissionsCommand",
    "CreatePermissionCommand",
    "PermissionCheckResult",
    "PermissionListResponse",
    "PermissionResponse",
    "RequiredPermission",
    "RoleListResponse",
    "RolePermissionsCommand",
    "RoleResponse",
    "SyncUserPermissionsCommand",
    "UserPermissionCheckResponse",
    "UserPermissionGrant",
    "UserPermissionsResponse",
]
