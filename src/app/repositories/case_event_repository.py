from abc import abstractmethod
from typing import List
from uuid import UUID

from src.app.repositories.tenant_scoped_repository import ITenantScopedRepository
from src.domain.entities import CaseEvent


class ICaseEventRepository(ITenantScopedRepository[CaseEvent]):
    """Case event repository interface - application layer"""

    @abstractmethod
    async def get_timeline(self, case_id: UUID) -> List[CaseEvent]:
        """Get events of a case ordered by event date"""
        pass
