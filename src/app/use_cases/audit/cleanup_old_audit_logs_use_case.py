"""
Cleanup Old Audit Logs Use Case

Retention job deleting audit entries by age.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit.dtos import CleanupResponse

logger = logging.getLogger(__name__)


class CleanupOldAuditLogsUseCase:
    """
    Business Rules:
    - With tenant_id, only that tenant's entries are removed (for_tenant)
    - Without tenant_id, the cleanup is system-wide (without_tenant_scope)
    - Entries are never updated, only deleted by age
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, older_than_days: int, tenant_id: Optional[UUID] = None
    ) -> CleanupResponse:
        cutoff = datetime.utcnow() - timedelta(days=older_than_days)

        async with self.uow:
            if tenant_id is not None:
                repository = self.uow.audit_logs.for_tenant(tenant_id)
            else:
                repository = self.uow.audit_logs.without_tenant_scope()

            deleted = await repository.delete_older_than(cutoff)
            await self.uow.commit()

        logger.info(
            "Deleted %d audit logs older than %s (tenant=%s)",
            deleted,
            cutoff.isoformat(),
            tenant_id or "all",
        )
        return CleanupResponse(
            deleted=deleted,
            cutoff=cutoff,
            tenant_id=str(tenant_id) if tenant_id else None,
        )
