from abc import abstractmethod
from datetime import datetime
from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from src.app.repositories.tenant_scoped_repository import ITenantScopedRepository
from src.domain.entities import Permission, UserPermission


class IPermissionRepository(ITenantScopedRepository[Permission]):
    """Permission repository interface - application layer"""

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Permission]:
        """Get permission by its unique name within the current tenant"""
        pass

    @abstractmethod
    async def get_by_resource_action(
        self, resource: str, action: str, context: str = "any"
    ) -> Optional[Permission]:
        """Get permission by (resource, action, context)"""
        pass

    @abstractmethod
    async def get_direct_grants_for_user(
        self, user_id: UUID
    ) -> List[Tuple[str, UserPermission]]:
        """Get (permission name, grant row) pairs held directly by the user"""
        pass

    @abstractmethod
    async def grant_to_user(
        self,
        user_id: UUID,
        permission: Permission,
        granted: bool = True,
        expires_at: Optional[datetime] = None,
    ) -> UserPermission:
        """Create or replace a direct grant/denial for a user"""
        pass

    @abstractmethod
    async def revoke_from_user(
        self, user_id: UUID, keep_permission_ids: Iterable[UUID] = ()
    ) -> int:
        """Remove the user's direct rows for this tenant's permissions, except keep_permission_ids"""
        pass
