from typing import Iterable, List, Optional, Set
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select

from src.adapter.repositories.tenant_scoped_repository import TenantScopedRepository
from src.app.repositories.role_repository import IRoleRepository
from src.domain.entities import Permission, Role, RolePermission, UserRole


class RoleRepository(TenantScopedRepository[Role], IRoleRepository):
    """Role repository implementation using SQLModel"""

    model = Role

    async def get_by_slug(self, slug: str) -> Optional[Role]:
        return await self.find_by(slug=slug)

    async def get_for_user(self, user_id: UUID) -> List[Role]:
        stmt = self._scoped(
            select(Role)
            .join(UserRole, UserRole.role_id == Role.id)
            .where(UserRole.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def assign_to_user(self, user_id: UUID, role: Role) -> None:
        self._guard_write(role, "assign")
        existing = await self.session.get(UserRole, (user_id, role.id))
        if existing is None:
            self.session.add(UserRole(user_id=user_id, role_id=role.id))
            await self.session.flush()

    async def attach_permissions(self, role: Role, permission_ids: Iterable[UUID]) -> None:
        self._guard_write(role, "attach")
        result = await self.session.execute(
            select(RolePermission.permission_id).where(RolePermission.role_id == role.id)
        )
        attached = set(result.scalars().all())
        for permission_id in permission_ids:
            if permission_id not in attached:
                self.session.add(RolePermission(role_id=role.id, permission_id=permission_id))
                attached.add(permission_id)
        await self.session.flush()

    async def get_permission_ids(self, role: Role) -> Set[UUID]:
        result = await self.session.execute(
            select(RolePermission.permission_id).where(RolePermission.role_id == role.id)
        )
        return set(result.scalars().all())

    async def detach_permissions(self, role: Role, permission_ids: Iterable[UUID]) -> int:
        self._guard_write(role, "detach")
        ids = list(permission_ids)
        if not ids:
            return 0
        result = await self.session.execute(
            delete(RolePermission).where(
                RolePermission.role_id == role.id, RolePermission.permission_id.in_(ids)
            )
        )
        await self.session.flush()
        return result.rowcount or 0

    async def sync_permissions(self, role: Role, permission_ids: Iterable[UUID]) -> None:
        wanted = set(permission_ids)
        current = await self.get_permission_ids(role)
        await self.detach_permissions(role, current - wanted)
        await self.attach_permissions(role, wanted - current)

    async def get_permission_names_for_user(self, user_id: UUID) -> Set[str]:
        stmt = (
            select(Permission.name)
            .join(RolePermission, RolePermission.permission_id == Permission.id)
            .join(Role, Role.id == RolePermission.role_id)
            .join(UserRole, UserRole.role_id == Role.id)
            .where(UserRole.user_id == user_id)
        )
        tenant_id = self._read_tenant_id()
        if tenant_id is not None:
            stmt = stmt.where(Role.tenant_id == tenant_id, Permission.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return set(result.scalars().all())
