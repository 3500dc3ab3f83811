from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.clients.dtos import ClientResponse, CreateClientCommand
from src.domain.entities import Client, ClientType
from src.domain.errors import DomainError


class CreateClientUseCase:
    """
    Create a client in the current tenant.

    Business Rules:
    - Individuals need full_name, companies need company_name
    - tenant_id is stamped from the active context, never from input
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: CreateClientCommand) -> ClientResponse:
        if command.client_type == ClientType.company and not command.company_name:
            raise DomainError("company_name is required for companies", "VALIDATION_ERROR")
        if command.client_type == ClientType.individual and not command.full_name:
            raise DomainError("full_name is required for individuals", "VALIDATION_ERROR")

        async with self.uow:
            client = await self.uow.clients.create(Client(**command.model_dump()))
            await self.uow.commit()
            return ClientResponse.from_entity(client)
