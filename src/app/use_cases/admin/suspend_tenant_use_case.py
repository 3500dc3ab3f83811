"""
Use Case: Suspend Tenant

Billing/support endpoint to suspend a tenant. Suspension is soft: the
tenant stops resolving, its data stays in place.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import TenantNotFound

logger = logging.getLogger(__name__)


class SuspendTenantResponse(BaseModel):
    """Response DTO for SuspendTenantUseCase"""

    status: str
    suspended_at: str
    reason: Optional[str] = None


class SuspendTenantUseCase:
    """
    Suspend a tenant.

    Business Logic:
    1. Validate tenant exists
    2. Set is_active=False, suspended_at and suspended_reason
    3. Requests resolving to the tenant are rejected from now on

    Idempotent: suspending an already-suspended tenant keeps the original
    suspension timestamp.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, reason: Optional[str] = None) -> SuspendTenantResponse:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if not tenant:
                raise TenantNotFound("Tenant not found")

            now = datetime.utcnow()
            if tenant.is_active or tenant.suspended_at is None:
                tenant.suspended_at = now
            tenant.is_active = False
            if reason is not None:
                tenant.suspended_reason = reason
            tenant.updated_at = now
            await self.uow.tenants.update(tenant)

            await self.uow.commit()

        logger.warning("Suspended tenant %s (reason=%r)", tenant_id, tenant.suspended_reason)
        return SuspendTenantResponse(
            status="suspended",
            suspended_at=tenant.suspended_at.isoformat(),
            reason=tenant.suspended_reason,
        )
