from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.clients.dtos import ClientResponse
from src.domain.errors import EntityNotFound


class GetClientUseCase:
    """Client by id; clients of other tenants are indistinguishable from missing ones"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, client_id: UUID) -> ClientResponse:
        async with self.uow:
            client = await self.uow.clients.get_by_id(client_id)
            if client is None:
                raise EntityNotFound("client", client_id)
            return ClientResponse.from_entity(client)
