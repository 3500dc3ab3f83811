from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import EntityNotFound


class DeleteClientUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, client_id: UUID) -> None:
        async with self.uow:
            client = await self.uow.clients.get_by_id(client_id)
            if client is None:
                raise EntityNotFound("client", client_id)

            await self.uow.clients.delete(client)
            await self.uow.commit()
