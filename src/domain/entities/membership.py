"""
Membership Entity

Links User to Tenant with a role.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, Relationship, SQLModel

from .enums import MembershipRole

if TYPE_CHECKING:
    from .user import User
    from .tenant import Tenant


class Membership(SQLModel, table=True):
    """
    Membership entity - one user's relationship to one tenant.

    Business Rules:
    - One user can be member of multiple tenants
    - (tenant_id, user_id) must be unique
    - Inactive memberships block access to the tenant
    - custom_permissions maps permission name -> bool and overrides
      role-derived access for this member
    """

    __tablename__ = "tenant_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    role: MembershipRole = Field(nullable=False)
    custom_permissions: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    is_active: bool = Field(default=True)

    invited_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    joined_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    # Relationships
    user: "User" = Relationship(back_populates="memberships")
    tenant: "Tenant" = Relationship(back_populates="memberships")

    __table_args__ = (
        Index("idx_tenant_user_unique", "tenant_id", "user_id", unique=True),
        Index("idx_tenant_user_is_active", "is_active"),
    )
