from datetime import datetime
from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select

from src.adapter.repositories.tenant_scoped_repository import TenantScopedRepository
from src.app.repositories.permission_repository import IPermissionRepository
from src.domain.entities import Permission, UserPermission
from src.domain.entities.permission import ANY_CONTEXT


class PermissionRepository(TenantScopedRepository[Permission], IPermissionRepository):
    """Permission repository implementation using SQLModel"""

    model = Permission

    async def get_by_name(self, name: str) -> Optional[Permission]:
        return await self.find_by(name=name)

    async def get_by_resource_action(
        self, resource: str, action: str, context: str = ANY_CONTEXT
    ) -> Optional[Permission]:
        return await self.find_by(resource=resource, action=action, context=context)

    async def get_direct_grants_for_user(
        self, user_id: UUID
    ) -> List[Tuple[str, UserPermission]]:
        stmt = self._scoped(
            select(Permission.name, UserPermission)
            .join(UserPermission, UserPermission.permission_id == Permission.id)
            .where(UserPermission.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return [(name, grant) for name, grant in result.all()]

    async def grant_to_user(
        self,
        user_id: UUID,
        permission: Permission,
        granted: bool = True,
        expires_at: Optional[datetime] = None,
    ) -> UserPermission:
        self._guard_write(permission, "grant")
        result = await self.session.execute(
            select(UserPermission).where(
                UserPermission.user_id == user_id,
                UserPermission.permission_id == permission.id,
            )
        )
        grant = result.scalars().first()
        if grant is None:
            grant = UserPermission(user_id=user_id, permission_id=permission.id)
        grant.granted = granted
        grant.expires_at = expires_at

        self.session.add(grant)
        await self.session.flush()
        await self.session.refresh(grant)
        return grant

    async def revoke_from_user(
        self, user_id: UUID, keep_permission_ids: Iterable[UUID] = ()
    ) -> int:
        # Only rows pointing at this repository's permissions
        owned = self._scoped(select(Permission.id))
        stmt = delete(UserPermission).where(
            UserPermission.user_id == user_id, UserPermission.permission_id.in_(owned)
        )
        keep = list(keep_permission_ids)
        if keep:
            stmt = stmt.where(UserPermission.permission_id.not_in(keep))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
