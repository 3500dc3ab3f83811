from abc import abstractmethod
from typing import List

from src.app.repositories.tenant_scoped_repository import ITenantScopedRepository
from src.domain.entities import Deadline


class IDeadlineRepository(ITenantScopedRepository[Deadline]):
    """Deadline repository interface - application layer"""

    @abstractmethod
    async def get_upcoming(self, days: int = 7) -> List[Deadline]:
        """Get pending deadlines due within the next days"""
        pass
