from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.cases.dtos import CaseListResponse, CaseResponse
from src.domain.entities import CaseStatus


class ListCasesUseCase:
    """Paginated cases of the current tenant"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        page: int = 1,
        per_page: int = 20,
        client_id: Optional[UUID] = None,
        status: Optional[CaseStatus] = None,
    ) -> CaseListResponse:
        filters = {}
        if client_id is not None:
            filters["client_id"] = client_id
        if status is not None:
            filters["status"] = status

        async with self.uow:
            result = await self.uow.cases.paginate(page=page, per_page=per_page, **filters)
            return CaseListResponse(
                cases=[CaseResponse.from_entity(c) for c in result.items],
                total=result.total,
                page=result.page,
                per_page=result.per_page,
                last_page=result.last_page,
            )
