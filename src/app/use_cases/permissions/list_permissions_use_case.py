from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions.dtos import PermissionListResponse, PermissionResponse


class ListPermissionsUseCase:
    """Paginated permission catalogue of the current tenant"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        page: int = 1,
        per_page: int = 20,
        resource: Optional[str] = None,
        action: Optional[str] = None,
    ) -> PermissionListResponse:
        filters = {}
        if resource:
            filters["resource"] = resource
        if action:
            filters["action"] = action

        async with self.uow:
            result = await self.uow.permissions.paginate(page=page, per_page=per_page, **filters)
            return PermissionListResponse(
                permissions=[PermissionResponse.from_entity(p) for p in result.items],
                total=result.total,
                page=result.page,
                per_page=result.per_page,
                last_page=result.last_page,
            )
