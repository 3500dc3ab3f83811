"""
Get Security Alerts Use Case
"""

from datetime import datetime, timedelta
from typing import List

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit.dtos import AuditLogResponse


class GetSecurityAlertsUseCase:
    """Denied permission checks of the current tenant within the last N days"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, days: int = 7) -> List[AuditLogResponse]:
        since = datetime.utcnow() - timedelta(days=days)
        async with self.uow:
            logs = await self.uow.audit_logs.get_security_alerts(since)
            return [AuditLogResponse.from_entity(log) for log in logs]
