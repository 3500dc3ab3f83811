"""
List User Tenants Use Case
"""

from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tenants.dtos import TenantInfo, TenantListResponse


class ListUserTenantsUseCase:
    """Active tenants in which the user holds an active membership"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> TenantListResponse:
        async with self.uow:
            tenants = await self.uow.tenants.get_active_for_user(user_id)
            return TenantListResponse(tenants=[TenantInfo.from_entity(t) for t in tenants])
