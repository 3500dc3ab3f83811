"""
Role Entity

A named, tenant-owned bundle of permissions.
"""

from uuid import UUID, uuid4
from typing import Optional

from sqlmodel import Field, Index, SQLModel

from ..base import TenantOwnedModel


class Role(TenantOwnedModel, table=True):
    __tablename__ = "roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    slug: str = Field(max_length=100)
    description: Optional[str] = Field(default=None)

    __table_args__ = (Index("idx_roles_tenant_slug", "tenant_id", "slug", unique=True),)


class UserRole(SQLModel, table=True):
    """User <-> Role pivot"""

    __tablename__ = "user_roles"

    user_id: UUID = Field(foreign_key="users.id", primary_key=True)
    role_id: UUID = Field(foreign_key="roles.id", primary_key=True)
