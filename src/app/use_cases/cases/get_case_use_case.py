from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.cases.dtos import CaseResponse
from src.domain.errors import EntityNotFound


class GetCaseUseCase:
    """Case by id with its event timeline and documents"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, case_id: UUID) -> CaseResponse:
        async with self.uow:
            case = await self.uow.cases.get_by_id(case_id)
            if case is None:
                raise EntityNotFound("case", case_id)

            timeline = await self.uow.case_events.get_timeline(case.id)
            documents = await self.uow.documents.get_by_case(case.id)
            return CaseResponse.from_entity(case, timeline, documents)
