"""
Log User Action Use Case
"""

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit.dtos import UserActionEntry
from src.domain.entities import AuditLog


class LogUserActionUseCase:
    """Record an action performed by a user in the current tenant"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, entry: UserActionEntry) -> AuditLog:
        async with self.uow:
            audit_log = await self.uow.audit_logs.create(
                AuditLog(
                    user_id=entry.user_id,
                    resource=entry.resource,
                    action=entry.action,
                    resource_id=entry.resource_id,
                    ip_address=entry.ip_address,
                    user_agent=entry.user_agent,
                    audit_metadata=entry.metadata,
                    result=entry.result,
                )
            )
            await self.uow.commit()
            return audit_log
