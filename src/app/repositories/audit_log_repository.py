from abc import abstractmethod
from datetime import datetime
from typing import Any, List, Optional, Tuple
from uuid import UUID

from src.app.repositories.tenant_scoped_repository import ITenantScopedRepository
from src.domain.entities import AuditLog


class IAuditLogRepository(ITenantScopedRepository[AuditLog]):
    """AuditLog repository interface - application layer"""

    @abstractmethod
    async def get_paginated(
        self, limit: int = 50, cursor: Optional[str] = None, **filters: Any
    ) -> Tuple[List[AuditLog], Optional[str]]:
        """Get audit logs newest first with cursor-based pagination"""
        pass

    @abstractmethod
    async def get_user_logs(self, user_id: UUID, limit: int = 100) -> List[AuditLog]:
        """Get audit logs for a specific user"""
        pass

    @abstractmethod
    async def get_security_alerts(self, since: datetime) -> List[AuditLog]:
        """Get denied decisions recorded since a point in time"""
        pass

    @abstractmethod
    async def delete_older_than(self, cutoff: datetime) -> int:
        """Delete audit logs created before cutoff, returning the count"""
        pass
