from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Membership


class IMembershipRepository(ABC):
    """
    Membership repository interface - application layer

    Memberships are the join between users and tenants and are read across
    tenants during resolution, so this repository is not tenant-scoped.
    """

    @abstractmethod
    async def get_active_by_user_and_tenant(
        self, user_id: UUID, tenant_id: UUID
    ) -> Optional[Membership]:
        """Get membership by user and tenant only if it is active"""
        pass

    @abstractmethod
    async def get_first_active_for_user(self, user_id: UUID) -> Optional[Membership]:
        """Get the user's first active membership whose tenant is also active"""
        pass

    @abstractmethod
    async def create(self, membership: Membership) -> Membership:
        """Create a new membership"""
        pass
