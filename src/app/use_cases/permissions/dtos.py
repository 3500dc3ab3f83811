"""
Permission Use Case DTOs
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import Role
from src.domain.entities.permission import ANY_CONTEXT, Permission


class RequiredPermission(BaseModel):
    """Structured (resource, action) pair demanded by a route"""

    model_config = ConfigDict(frozen=True)

    resource: str
    action: str

    @property
    def name(self) -> str:
        return Permission.build_name(self.resource, self.action)

    def qualified_name(self, context: Optional[str]) -> str:
        return Permission.build_name(self.resource, self.action, context)

    def __str__(self) -> str:
        return self.name


class PermissionCheckResult(BaseModel):
    granted: bool
    required_permissions: list[str]
    reason: str


# ============================================================================
# Command DTOs
# ============================================================================


class CreatePermissionCommand(BaseModel):
    resource: str = Field(..., min_length=1, max_length=100, pattern=r"^[a-z0-9_]+$")
    action: str = Field(..., min_length=1, max_length=50, pattern=r"^[a-z0-9_]+$")
    context: str = Field(default=ANY_CONTEXT, min_length=1, max_length=50)
    description: Optional[str] = Field(default=None, max_length=500)


class RolePermissionsCommand(BaseModel):
    """Permission ids to sync, attach or detach on a role"""

    permission_ids: List[UUID]


class UserPermissionGrant(BaseModel):
    permission_id: UUID
    granted: bool = True
    expires_at: Optional[datetime] = None


class SyncUserPermissionsCommand(BaseModel):
    """Replaces every direct grant and denial the user holds in the tenant"""

    permissions: List[UserPermissionGrant]


class CheckUserPermissionsCommand(BaseModel):
    permissions: List[RequiredPermission] = Field(..., min_length=1)
    require_all: bool = False
    context: Optional[str] = None


class AssignRolesCommand(BaseModel):
    user_id: UUID
    role_ids: List[UUID] = Field(..., min_length=1)


# ============================================================================
# Response DTOs
# ============================================================================


class PermissionResponse(BaseModel):
    id: str
    name: str
    resource: str
    action: str
    context: str
    description: Optional[str] = None

    @classmethod
    def from_entity(cls, permission: Permission) -> "PermissionResponse":
        return cls(
            id=str(permission.id),
            name=permission.name,
            resource=permission.resource,
            action=permission.action,
            context=permission.context,
            description=permission.description,
        )


class PermissionListResponse(BaseModel):
    permissions: List[PermissionResponse]
    total: int
    page: int
    per_page: int
    last_page: int


class RoleResponse(BaseModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    permissions: Optional[List[str]] = None

    @classmethod
    def from_entity(cls, role: Role, permissions: Optional[List[str]] = None) -> "RoleResponse":
        return cls(
            id=str(role.id),
            name=role.name,
            slug=role.slug,
            description=role.description,
            permissions=permissions,
        )


class RoleListResponse(BaseModel):
    roles: List[RoleResponse]
    total: int
    page: int
    per_page: int
    last_page: int


class UserPermissionsResponse(BaseModel):
    user_id: str
    roles: List[str]
    permissions: List[str]


class UserPermissionCheckResponse(BaseModel):
    has_permission: bool
    required_permissions: List[str]
