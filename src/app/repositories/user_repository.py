from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """
    User repository interface - application layer

    Users are global: one person may belong to many tenants, so this
    repository is never tenant-scoped.
    """

    @abstractmethod
    async def get_active_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID, None when deactivated"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        pass
