"""
Create Permission Use Case
"""

import logging

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions.dtos import CreatePermissionCommand, PermissionResponse
from src.domain.entities import Permission
from src.domain.errors import Conflict

logger = logging.getLogger(__name__)


class CreatePermissionUseCase:
    """
    Business Rules:
    - (resource, action, context) is unique within the tenant (PERMISSION_EXISTS)
    - The name is derived, never supplied by the caller
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreatePermissionCommand) -> PermissionResponse:
        async with self.uow:
            existing = await self.uow.permissions.get_by_resource_action(
                command.resource, command.action, command.context
            )
            if existing is not None:
                raise Conflict(
                    f"Permission '{existing.name}' already exists", "PERMISSION_EXISTS"
                )

            permission = await self.uow.permissions.create(
                Permission(
                    name=Permission.build_name(command.resource, command.action, command.context),
                    resource=command.resource,
                    action=command.action,
                    context=command.context,
                    description=command.description,
                )
            )
            await self.uow.commit()

            logger.info(
                "Created permission %s in tenant %s", permission.name, permission.tenant_id
            )
            return PermissionResponse.from_entity(permission)
