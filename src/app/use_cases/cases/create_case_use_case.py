from datetime import datetime
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.cases.dtos import CaseResponse, CreateCaseCommand
from src.domain.entities import CaseEvent, CaseEventType, CaseStatus, LegalCase
from src.domain.errors import EntityNotFound


class CreateCaseUseCase:
    """
    Open a case for a client of the current tenant.

    Business Rules:
    - The client must be visible in the current tenant; another tenant's
      client id is reported as CLIENT_NOT_FOUND
    - responsible_lawyer_id defaults to the creating user
    - The timeline starts with a system "Case opened" event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, command: CreateCaseCommand) -> CaseResponse:
        async with self.uow:
            client = await self.uow.clients.get_by_id(command.client_id)
            if client is None:
                raise EntityNotFound("client", command.client_id)

            data = command.model_dump()
            if data.get("responsible_lawyer_id") is None:
                data["responsible_lawyer_id"] = user_id

            case = await self.uow.cases.create(LegalCase(status=CaseStatus.active, **data))
            event = await self.uow.case_events.create(
                CaseEvent(
                    case_id=case.id,
                    event_type=CaseEventType.other,
                    title="Case opened",
                    event_date=datetime.utcnow(),
                    source="system",
                    created_by=user_id,
                )
            )
            await self.uow.commit()
            return CaseResponse.from_entity(case, [event])
