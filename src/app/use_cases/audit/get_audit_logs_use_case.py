"""
Get Audit Logs Use Case

Retrieves the current tenant's audit trail with cursor pagination.
"""

from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit.dtos import AuditLogPage, AuditLogResponse
from src.domain.entities import AuditResult


class GetAuditLogsUseCase:
    """
    Business Rules:
    - Results are tenant-scoped (only entries of the active tenant)
    - Results ordered by newest first
    - Supports cursor-based pagination
    - Optional filters: user, resource, action, result
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        limit: int = 50,
        cursor: Optional[str] = None,
        user_id: Optional[UUID] = None,
        resource: Optional[str] = None,
        action: Optional[str] = None,
        result: Optional[AuditResult] = None,
    ) -> AuditLogPage:
        filters = {
            name: value
            for name, value in (
                ("user_id", user_id),
                ("resource", resource),
                ("action", action),
                ("result", result),
            )
            if value is not None
        }

        async with self.uow:
            logs, next_cursor = await self.uow.audit_logs.get_paginated(
                limit=limit, cursor=cursor, **filters
            )
            return AuditLogPage(
                logs=[AuditLogResponse.from_entity(log) for log in logs],
                next_cursor=next_cursor,
            )
