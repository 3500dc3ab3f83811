from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions.check_permission_use_case import CheckPermissionUseCase
from src.app.use_cases.permissions.dtos import (
    CheckUserPermissionsCommand,
    UserPermissionCheckResponse,
)
from src.app.use_cases.permissions.members import require_member


class CheckUserPermissionsUseCase:
    """
    Answers whether another member holds the given permissions.

    Business Rules:
    - Same evaluation as the route guard, using the member's own membership
      overrides
    - Nothing is written to the audit trail for the inspected member; the
      caller's own guard check is audited by the route
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, command: CheckUserPermissionsCommand
    ) -> UserPermissionCheckResponse:
        async with self.uow:
            membership = await require_member(self.uow, user_id)
            effective = await CheckPermissionUseCase(self.uow).get_effective_permissions(
                user_id, membership
            )

        matches = [
            CheckPermissionUseCase.holds(effective, permission, command.context)
            for permission in command.permissions
        ]
        return UserPermissionCheckResponse(
            has_permission=all(matches) if command.require_all else any(matches),
            required_permissions=[p.name for p in command.permissions],
        )
