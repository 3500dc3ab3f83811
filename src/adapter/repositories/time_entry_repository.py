from typing import Optional
from uuid import UUID

from sqlmodel import select

from src.adapter.repositories.tenant_scoped_repository import TenantScopedRepository
from src.app.repositories.time_entry_repository import ITimeEntryRepository
from src.domain.entities import TimeEntry


class TimeEntryRepository(TenantScopedRepository[TimeEntry], ITimeEntryRepository):
    """Time entry repository implementation using SQLModel"""

    model = TimeEntry

    async def get_running_for_user(self, user_id: UUID) -> Optional[TimeEntry]:
        stmt = self._scoped(select(TimeEntry)).where(
            TimeEntry.user_id == user_id, TimeEntry.ended_at.is_(None)
        )
        result = await self.session.execute(stmt.limit(1))
        return result.scalars().first()
