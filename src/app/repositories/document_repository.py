from abc import abstractmethod
from typing import List
from uuid import UUID

from src.app.repositories.tenant_scoped_repository import ITenantScopedRepository
from src.domain.entities import Document


class IDocumentRepository(ITenantScopedRepository[Document]):
    """Document repository interface - application layer"""

    @abstractmethod
    async def get_by_case(self, case_id: UUID) -> List[Document]:
        """Get documents attached to a case"""
        pass
