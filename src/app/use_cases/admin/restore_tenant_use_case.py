"""
Use Case: Restore Tenant

Billing/support endpoint to restore a suspended tenant.
"""

import logging
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import TenantNotFound

logger = logging.getLogger(__name__)


class RestoreTenantResponse(BaseModel):
    """Response DTO for RestoreTenantUseCase"""

    status: str


class RestoreTenantUseCase:
    """
    Restore a suspended tenant.

    Business Logic:
    1. Validate tenant exists
    2. Set is_active=True and clear the suspension fields

    Idempotent: restoring an already-active tenant succeeds
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> RestoreTenantResponse:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if not tenant:
                raise TenantNotFound("Tenant not found")

            tenant.is_active = True
            tenant.suspended_at = None
            tenant.suspended_reason = None
            tenant.updated_at = datetime.utcnow()
            await self.uow.tenants.update(tenant)

            await self.uow.commit()

        logger.info("Restored tenant %s", tenant_id)
        return RestoreTenantResponse(status="active")
