from abc import abstractmethod
from typing import List

from src.app.repositories.tenant_scoped_repository import ITenantScopedRepository
from src.domain.entities import Client


class IClientRepository(ITenantScopedRepository[Client]):
    """Client repository interface - application layer"""

    @abstractmethod
    async def search(self, term: str, limit: int = 20) -> List[Client]:
        """Search clients by name, company name or email"""
        pass
