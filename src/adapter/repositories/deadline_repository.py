from datetime import datetime, timedelta
from typing import List

from sqlmodel import select

from src.adapter.repositories.tenant_scoped_repository import TenantScopedRepository
from src.app.repositories.deadline_repository import IDeadlineRepository
from src.domain.entities import Deadline, DeadlineStatus


class DeadlineRepository(TenantScopedRepository[Deadline], IDeadlineRepository):
    """Deadline repository implementation using SQLModel"""

    model = Deadline

    async def get_upcoming(self, days: int = 7) -> List[Deadline]:
        now = datetime.utcnow()
        stmt = self._scoped(select(Deadline)).where(
            Deadline.status == DeadlineStatus.pending,
            Deadline.deadline_date >= now,
            Deadline.deadline_date <= now + timedelta(days=days),
        )
        result = await self.session.execute(stmt.order_by(Deadline.deadline_date))
        return list(result.scalars().all())
