"""
Sync Default Permissions Use Case

Ensures the current tenant holds every permission of the default catalogue.
"""

import logging
from typing import List

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions.defaults import DEFAULT_PERMISSIONS
from src.domain.entities import Permission
from src.domain.entities.permission import ANY_CONTEXT

logger = logging.getLogger(__name__)


class SyncDefaultPermissionsUseCase:
    """
    First-or-create every default permission inside the current tenant.

    Business Rules:
    - Idempotent: existing (resource, action, context) rows are reused
    - Rows are stamped with the tenant of the active context
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> List[Permission]:
        async with self.uow:
            permissions = await self.seed()
            await self.uow.commit()
            return permissions

    async def seed(self) -> List[Permission]:
        """Run inside an already open unit of work"""
        permissions = []
        created = 0
        for resource, action in DEFAULT_PERMISSIONS:
            permission = await self.uow.permissions.get_by_resource_action(
                resource, action, ANY_CONTEXT
            )
            if permission is None:
                permission = await self.uow.permissions.create(
                    Permission(
                        name=Permission.build_name(resource, action),
                        resource=resource,
                        action=action,
                        context=ANY_CONTEXT,
                        description=f"{action.capitalize()} {resource.replace('_', ' ')}",
                    )
                )
                created += 1
            permissions.append(permission)

        logger.info(
            "Synced default permissions for tenant %s (%d created)",
            self.uow.tenant_context.get_current_tenant_id(),
            created,
        )
        return permissions
