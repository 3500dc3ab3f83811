"""
Sync Role Permissions Use Case

Replaces, extends or trims the permission set of one role.
"""

import logging
from typing import List, Sequence
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions.dtos import RoleResponse
from src.domain.entities import Role
from src.domain.errors import EntityNotFound

logger = logging.getLogger(__name__)


class SyncRolePermissionsUseCase:
    """
    Business Rules:
    - The role and every permission must belong to the current tenant;
      ids from another tenant are reported as not found
    - execute() makes permission_ids the exact set, attach() only adds and
      detach() only removes; all three are idempotent
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, role_id: UUID, permission_ids: Sequence[UUID]) -> RoleResponse:
        async with self.uow:
            role = await self._load_role(role_id)
            ids = await self._existing_ids(permission_ids)
            await self.uow.roles.sync_permissions(role, ids)
            return await self._finish(role, "Synced")

    async def attach(self, role_id: UUID, permission_ids: Sequence[UUID]) -> RoleResponse:
        async with self.uow:
            role = await self._load_role(role_id)
            ids = await self._existing_ids(permission_ids)
            await self.uow.roles.attach_permissions(role, ids)
            return await self._finish(role, "Attached")

    async def detach(self, role_id: UUID, permission_ids: Sequence[UUID]) -> RoleResponse:
        async with self.uow:
            role = await self._load_role(role_id)
            ids = await self._existing_ids(permission_ids)
            await self.uow.roles.detach_permissions(role, ids)
            return await self._finish(role, "Detached")

    async def _load_role(self, role_id: UUID) -> Role:
        role = await self.uow.roles.get_by_id(role_id)
        if role is None:
            raise EntityNotFound("role", role_id)
        return role

    async def _existing_ids(self, permission_ids: Sequence[UUID]) -> List[UUID]:
        wanted = list(dict.fromkeys(permission_ids))
        found = {p.id for p in await self.uow.permissions.get_many(wanted)}
        for permission_id in wanted:
            if permission_id not in found:
                raise EntityNotFound("permission", permission_id)
        return wanted

    async def _finish(self, role: Role, verb: str) -> RoleResponse:
        response = RoleResponse.from_entity(role)
        attached = await self.uow.permissions.get_many(
            await self.uow.roles.get_permission_ids(role)
        )
        response.permissions = sorted(p.name for p in attached)
        await self.uow.commit()

        logger.info(
            "%s permissions of role %s in tenant %s", verb, role.slug, role.tenant_id
        )
        return response
