"""
Sync User Permissions Use Case

Direct per-user grants and denials, layered over role permissions.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions.dtos import SyncUserPermissionsCommand, UserPermissionsResponse
from src.app.use_cases.permissions.get_user_permissions_use_case import (
    GetUserPermissionsUseCase,
)
from src.app.use_cases.permissions.members import require_member
from src.domain.errors import DomainError, EntityNotFound

logger = logging.getLogger(__name__)


def _naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Expiry columns hold naive UTC
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class SyncUserPermissionsUseCase:
    """
    Business Rules:
    - The user must hold an active membership in the current tenant
    - Every permission must belong to the current tenant
    - The command replaces the user's direct rows in this tenant: listed
      permissions are upserted (granted, expires_at), unlisted ones removed
    - Rows of other tenants are never touched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, command: SyncUserPermissionsCommand
    ) -> UserPermissionsResponse:
        async with self.uow:
            membership = await require_member(self.uow, user_id)

            ids: List[UUID] = [grant.permission_id for grant in command.permissions]
            if len(set(ids)) != len(ids):
                raise DomainError("Each permission may appear only once", "DUPLICATE_PERMISSION")

            permissions = {p.id: p for p in await self.uow.permissions.get_many(ids)}
            for permission_id in ids:
                if permission_id not in permissions:
                    raise EntityNotFound("permission", permission_id)

            await self.uow.permissions.revoke_from_user(user_id, keep_permission_ids=ids)
            for grant in command.permissions:
                await self.uow.permissions.grant_to_user(
                    user_id,
                    permissions[grant.permission_id],
                    granted=grant.granted,
                    expires_at=_naive_utc(grant.expires_at),
                )

            response = await GetUserPermissionsUseCase(self.uow).describe(user_id, membership)
            await self.uow.commit()

            logger.info(
                "Synced %d direct permissions of user %s in tenant %s",
                len(ids),
                user_id,
                membership.tenant_id,
            )
            return response
