from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions.dtos import RoleListResponse, RoleResponse


class ListRolesUseCase:
    """Paginated roles of the current tenant"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, page: int = 1, per_page: int = 20) -> RoleListResponse:
        async with self.uow:
            result = await self.uow.roles.paginate(page=page, per_page=per_page)
            return RoleListResponse(
                roles=[RoleResponse.from_entity(role) for role in result.items],
                total=result.total,
                page=result.page,
                per_page=result.per_page,
                last_page=result.last_page,
            )
