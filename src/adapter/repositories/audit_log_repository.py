import base64
from datetime import datetime
from typing import Any, List, Optional, Tuple
from uuid import UUID

from sqlmodel import select

from src.adapter.repositories.tenant_scoped_repository import TenantScopedRepository
from src.app.repositories.audit_log_repository import IAuditLogRepository
from src.domain.entities import AuditLog, AuditResult


class AuditLogRepository(TenantScopedRepository[AuditLog], IAuditLogRepository):
    """AuditLog repository implementation using SQLModel"""

    model = AuditLog

    async def get_paginated(
        self, limit: int = 50, cursor: Optional[str] = None, **filters: Any
    ) -> Tuple[List[AuditLog], Optional[str]]:
        """
        Get audit logs for the current tenant with cursor-based pagination.

        Cursor format: base64-encoded ISO timestamp of created_at
        """
        stmt = self._filtered(self._scoped(select(AuditLog)), filters)

        if cursor:
            try:
                cursor_timestamp_str = base64.b64decode(cursor).decode("utf-8")
                cursor_timestamp = datetime.fromisoformat(cursor_timestamp_str)
                stmt = stmt.where(AuditLog.created_at < cursor_timestamp)
            except (ValueError, TypeError):
                # Invalid cursor, ignore and return from beginning
                pass

        stmt = stmt.order_by(AuditLog.created_at.desc()).limit(limit + 1)

        result = await self.session.execute(stmt)
        logs = list(result.scalars().all())

        has_more = len(logs) > limit
        if has_more:
            logs = logs[:limit]

        next_cursor = None
        if has_more and logs:
            cursor_timestamp_str = logs[-1].created_at.isoformat()
            next_cursor = base64.b64encode(cursor_timestamp_str.encode("utf-8")).decode("utf-8")

        return logs, next_cursor

    async def get_user_logs(self, user_id: UUID, limit: int = 100) -> List[AuditLog]:
        return await self.list(limit=limit, user_id=user_id)

    async def get_security_alerts(self, since: datetime) -> List[AuditLog]:
        stmt = self._scoped(select(AuditLog)).where(
            AuditLog.result == AuditResult.denied,
            AuditLog.created_at >= since,
        )
        result = await self.session.execute(stmt.order_by(AuditLog.created_at.desc()))
        return list(result.scalars().all())

    async def delete_older_than(self, cutoff: datetime) -> int:
        return await self._delete_where(AuditLog.created_at < cutoff)
