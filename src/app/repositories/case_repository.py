from abc import abstractmethod
from typing import List
from uuid import UUID

from src.app.repositories.tenant_scoped_repository import ITenantScopedRepository
from src.domain.entities import LegalCase


class ICaseRepository(ITenantScopedRepository[LegalCase]):
    """Case repository interface - application layer"""

    @abstractmethod
    async def get_by_client(self, client_id: UUID) -> List[LegalCase]:
        """Get all cases of a client"""
        pass
