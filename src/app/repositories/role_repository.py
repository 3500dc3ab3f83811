from abc import abstractmethod
from typing import Iterable, List, Optional, Set
from uuid import UUID

from src.app.repositories.tenant_scoped_repository import ITenantScopedRepository
from src.domain.entities import Role


class IRoleRepository(ITenantScopedRepository[Role]):
    """Role repository interface - application layer"""

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[Role]:
        """Get role by slug within the current tenant"""
        pass

    @abstractmethod
    async def get_for_user(self, user_id: UUID) -> List[Role]:
        """Get roles assigned to a user within the current tenant"""
        pass

    @abstractmethod
    async def assign_to_user(self, user_id: UUID, role: Role) -> None:
        """Assign a role to a user (idempotent)"""
        pass

    @abstractmethod
    async def attach_permissions(self, role: Role, permission_ids: Iterable[UUID]) -> None:
        """Attach permissions to a role (idempotent)"""
        pass

    @abstractmethod
    async def get_permission_ids(self, role: Role) -> Set[UUID]:
        """Ids of the permissions attached to a role"""
        pass

    @abstractmethod
    async def detach_permissions(self, role: Role, permission_ids: Iterable[UUID]) -> int:
        """Detach permissions from a role; returns how many were attached"""
        pass

    @abstractmethod
    async def sync_permissions(self, role: Role, permission_ids: Iterable[UUID]) -> None:
        """Make permission_ids the exact permission set of a role"""
        pass

    @abstractmethod
    async def get_permission_names_for_user(self, user_id: UUID) -> Set[str]:
        """Get names of permissions the user holds through roles"""
        pass
