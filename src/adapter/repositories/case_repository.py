from typing import List
from uuid import UUID

from src.adapter.repositories.tenant_scoped_repository import TenantScopedRepository
from src.app.repositories.case_repository import ICaseRepository
from src.domain.entities import LegalCase


class CaseRepository(TenantScopedRepository[LegalCase], ICaseRepository):
    """Case repository implementation using SQLModel"""

    model = LegalCase

    async def get_by_client(self, client_id: UUID) -> List[LegalCase]:
        return await self.list(client_id=client_id)
