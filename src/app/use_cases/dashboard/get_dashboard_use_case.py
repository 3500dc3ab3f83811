from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dashboard.dtos import (
    DashboardResponse,
    DeadlineSummary,
    RunningTimerSummary,
)


class GetDashboardUseCase:
    """Pending deadlines of the next N days and the caller's running timer, current tenant only"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, days: int = 7) -> DashboardResponse:
        async with self.uow:
            deadlines = await self.uow.deadlines.get_upcoming(days=days)
            running = await self.uow.time_entries.get_running_for_user(user_id)
            return DashboardResponse(
                upcoming_deadlines=[DeadlineSummary.from_entity(d) for d in deadlines],
                running_timer=RunningTimerSummary.from_entity(running) if running else None,
            )
