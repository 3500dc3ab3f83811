from typing import List
from uuid import UUID

from src.adapter.repositories.tenant_scoped_repository import TenantScopedRepository
from src.app.repositories.document_repository import IDocumentRepository
from src.domain.entities import Document


class DocumentRepository(TenantScopedRepository[Document], IDocumentRepository):
    """Document repository implementation using SQLModel"""

    model = Document

    async def get_by_case(self, case_id: UUID) -> List[Document]:
        return await self.list(case_id=case_id)
