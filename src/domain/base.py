from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import DateTime, Field, SQLModel


class TenantOwnedModel(SQLModel):
    """
    Base for every record confined to one tenant.

    tenant_id is Optional only at construction time: tenant-scoped
    repositories stamp it from the active context before insert, and the
    column itself is NOT NULL.
    """

    tenant_id: Optional[UUID] = Field(
        default=None, foreign_key="tenants.id", index=True, nullable=False
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_type=DateTime
    )

    def belongs_to_tenant(self, tenant_id: Optional[UUID]) -> bool:
        return tenant_id is not None and self.tenant_id == tenant_id
