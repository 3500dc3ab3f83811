from typing import Optional

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.clients.dtos import ClientListResponse, ClientResponse


class ListClientsUseCase:
    """Paginated clients of the current tenant, optionally searched by term"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, page: int = 1, per_page: int = 20, search: Optional[str] = None
    ) -> ClientListResponse:
        async with self.uow:
            if search:
                clients = await self.uow.clients.search(search, limit=per_page)
                return ClientListResponse(
                    clients=[ClientResponse.from_entity(c) for c in clients],
                    total=len(clients),
                    page=1,
                    per_page=per_page,
                    last_page=1,
                )

            result = await self.uow.clients.paginate(page=page, per_page=per_page)
            return ClientListResponse(
                clients=[ClientResponse.from_entity(c) for c in result.items],
                total=result.total,
                page=result.page,
                per_page=result.per_page,
                last_page=result.last_page,
            )
