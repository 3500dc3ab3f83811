from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit.dtos import AuditLogResponse


class GetUserAuditLogsUseCase:
    """Latest audit entries of one user inside the current tenant"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, limit: int = 100) -> List[AuditLogResponse]:
        async with self.uow:
            logs = await self.uow.audit_logs.get_user_logs(user_id, limit=limit)
            return [AuditLogResponse.from_entity(log) for log in logs]
