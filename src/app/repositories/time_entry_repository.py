from abc import abstractmethod
from typing import Optional
from uuid import UUID

from src.app.repositories.tenant_scoped_repository import ITenantScopedRepository
from src.domain.entities import TimeEntry


class ITimeEntryRepository(ITenantScopedRepository[TimeEntry]):
    """Time entry repository interface - application layer"""

    @abstractmethod
    async def get_running_for_user(self, user_id: UUID) -> Optional[TimeEntry]:
        """Get the user's timer that has not been stopped yet"""
        pass
