"""
Tenant Entity

Represents an isolated law firm workspace.
"""

from datetime import datetime
from typing import Optional, TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, JSON, Relationship, SQLModel

from .enums import TenantPlan

if TYPE_CHECKING:
    from .membership import Membership


class Tenant(SQLModel, table=True):
    """
    Tenant entity - isolation boundary for all practice data.

    Business Rules:
    - Subdomain is unique; custom domain is unique when set
    - Suspension is soft: is_active=False plus suspended_at/suspended_reason
    - Never hard-deleted in normal operation
    """

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    subdomain: str = Field(max_length=63, unique=True, index=True)
    custom_domain: Optional[str] = Field(default=None, max_length=255, unique=True)

    plan: TenantPlan = Field(default=TenantPlan.free)
    is_active: bool = Field(default=True)

    # e.g. {"max_users": 5, "max_cases": 100, "max_storage_gb": 10}
    limits: Optional[dict] = Field(default=None, sa_column=Column(JSON))

    trial_ends_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    suspended_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    suspended_reason: Optional[str] = Field(default=None, max_length=500)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Relationships
    memberships: list["Membership"] = Relationship(back_populates="tenant")

    __table_args__ = (Index("idx_tenant_is_active", "is_active"),)
