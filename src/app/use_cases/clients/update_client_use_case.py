from datetime import datetime
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.clients.dtos import ClientResponse, UpdateClientCommand
from src.domain.errors import EntityNotFound


class UpdateClientUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, client_id: UUID, command: UpdateClientCommand) -> ClientResponse:
        async with self.uow:
            client = await self.uow.clients.get_by_id(client_id)
            if client is None:
                raise EntityNotFound("client", client_id)

            for name, value in command.model_dump(exclude_unset=True).items():
                setattr(client, name, value)
            client.updated_at = datetime.utcnow()

            client = await self.uow.clients.update(client)
            await self.uow.commit()
            return ClientResponse.from_entity(client)
