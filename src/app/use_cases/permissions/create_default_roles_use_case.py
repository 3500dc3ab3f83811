"""
Create Default Roles Use Case

Seeds owner/admin/lawyer/assistant roles for the current tenant and links
them to the default permission catalogue.
"""

from typing import Dict, List

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions.defaults import DEFAULT_ROLES, permissions_for_role
from src.domain.entities import Permission, Role


class CreateDefaultRolesUseCase:
    """
    Business Rules:
    - Idempotent per (tenant, slug)
    - Requires the default permissions to exist already (see
      SyncDefaultPermissionsUseCase); missing ones are skipped
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Dict[str, Role]:
        async with self.uow:
            roles = await self.seed()
            await self.uow.commit()
            return roles

    async def seed(self, permissions: List[Permission] = None) -> Dict[str, Role]:
        """Run inside an already open unit of work"""
        if permissions is None:
            permissions = await self.uow.permissions.list()
        by_pair = {(p.resource, p.action): p for p in permissions}

        roles = {}
        for definition in DEFAULT_ROLES:
            role = await self.uow.roles.get_by_slug(definition["slug"])
            if role is None:
                role = await self.uow.roles.create(Role(**definition))

            permission_ids = [
                by_pair[pair].id
                for pair in permissions_for_role(definition["slug"])
                if pair in by_pair
            ]
            await self.uow.roles.attach_permissions(role, permission_ids)
            roles[role.slug] = role

        return roles
