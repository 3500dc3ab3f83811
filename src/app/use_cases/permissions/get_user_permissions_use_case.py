from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions.check_permission_use_case import CheckPermissionUseCase
from src.app.use_cases.permissions.dtos import UserPermissionsResponse
from src.app.use_cases.permissions.members import require_member
from src.domain.entities import Membership


class GetUserPermissionsUseCase:
    """Roles and effective permission names of one member of the current tenant"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> UserPermissionsResponse:
        async with self.uow:
            membership = await require_member(self.uow, user_id)
            return await self.describe(user_id, membership)

    async def describe(self, user_id: UUID, membership: Membership) -> UserPermissionsResponse:
        """Run inside an already open unit of work"""
        roles = await self.uow.roles.get_for_user(user_id)
        effective = await CheckPermissionUseCase(self.uow).get_effective_permissions(
            user_id, membership
        )
        return UserPermissionsResponse(
            user_id=str(user_id),
            roles=sorted(role.slug for role in roles),
            permissions=sorted(effective),
        )
