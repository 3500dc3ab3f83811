"""
Assign Roles Use Case
"""

import logging

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions.dtos import AssignRolesCommand, UserPermissionsResponse
from src.app.use_cases.permissions.get_user_permissions_use_case import (
    GetUserPermissionsUseCase,
)
from src.app.use_cases.permissions.members import require_member
from src.domain.errors import Conflict, EntityNotFound

logger = logging.getLogger(__name__)


class AssignRolesUseCase:
    """
    Business Rules:
    - The user must hold an active membership in the current tenant
    - Every role must belong to the current tenant (ROLE_NOT_FOUND)
    - Assigning a role the user already has is a conflict (ROLE_ALREADY_ASSIGNED)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: AssignRolesCommand) -> UserPermissionsResponse:
        async with self.uow:
            membership = await require_member(self.uow, command.user_id)

            role_ids = list(dict.fromkeys(command.role_ids))
            roles = {role.id: role for role in await self.uow.roles.get_many(role_ids)}
            for role_id in role_ids:
                if role_id not in roles:
                    raise EntityNotFound("role", role_id)

            held = {role.id for role in await self.uow.roles.get_for_user(command.user_id)}
            if held.intersection(role_ids):
                raise Conflict("User already has this role", "ROLE_ALREADY_ASSIGNED")

            for role_id in role_ids:
                await self.uow.roles.assign_to_user(command.user_id, roles[role_id])

            response = await GetUserPermissionsUseCase(self.uow).describe(
                command.user_id, membership
            )
            await self.uow.commit()

            logger.info(
                "Assigned roles %s to user %s in tenant %s",
                ", ".join(sorted(role.slug for role in roles.values())),
                command.user_id,
                membership.tenant_id,
            )
            return response
