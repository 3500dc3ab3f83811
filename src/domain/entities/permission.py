"""
Permission Entities

A permission is (resource, action, optional context) with a derived unique
name. Roles bundle permissions; users may also hold direct grants or
denials with an optional expiry.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import TenantOwnedModel

ANY_CONTEXT = "any"
NAME_SEPARATOR = "."


class Permission(TenantOwnedModel, table=True):
    """
    Permission entity - tenant-owned capability definition.

    Business Rules:
    - (tenant_id, resource, action, context) is unique
    - name defaults to "resource.action", or "resource.action.context"
      when a context other than "any" is given
    """

    __tablename__ = "permissions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=500)
    resource: str = Field(max_length=100)
    action: str = Field(max_length=50)
    context: str = Field(default=ANY_CONTEXT, max_length=50)

    __table_args__ = (
        Index(
            "idx_permissions_tenant_resource_action_context",
            "tenant_id",
            "resource",
            "action",
            "context",
            unique=True,
        ),
        Index("idx_permissions_tenant_name", "tenant_id", "name"),
    )

    @staticmethod
    def build_name(resource: str, action: str, context: Optional[str] = None) -> str:
        parts = [resource, action]
        if context and context != ANY_CONTEXT:
            parts.append(context)
        return NAME_SEPARATOR.join(parts)


class RolePermission(SQLModel, table=True):
    """Role <-> Permission pivot"""

    __tablename__ = "role_permissions"

    role_id: UUID = Field(foreign_key="roles.id", primary_key=True)
    permission_id: UUID = Field(foreign_key="permissions.id", primary_key=True)


class UserPermission(SQLModel, table=True):
    """
    Direct per-user permission grant.

    granted=False is an explicit denial that overrides role-derived access.
    Rows past expires_at are ignored.
    """

    __tablename__ = "user_permissions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    permission_id: UUID = Field(foreign_key="permissions.id", nullable=False)
    granted: bool = Field(default=True)
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_user_permission_unique", "user_id", "permission_id", unique=True),
    )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at <= (now or datetime.utcnow())
