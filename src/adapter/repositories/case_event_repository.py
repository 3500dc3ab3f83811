from typing import List
from uuid import UUID

from sqlmodel import select

from src.adapter.repositories.tenant_scoped_repository import TenantScopedRepository
from src.app.repositories.case_event_repository import ICaseEventRepository
from src.domain.entities import CaseEvent


class CaseEventRepository(TenantScopedRepository[CaseEvent], ICaseEventRepository):
    """Case event repository implementation using SQLModel"""

    model = CaseEvent

    async def get_timeline(self, case_id: UUID) -> List[CaseEvent]:
        stmt = self._scoped(select(CaseEvent)).where(CaseEvent.case_id == case_id)
        result = await self.session.execute(stmt.order_by(CaseEvent.event_date))
        return list(result.scalars().all())
