"""
Dashboard API Routes
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.permissions import permission, require_permissions
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dashboard import DashboardResponse, GetDashboardUseCase
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=DashboardResponse,
    dependencies=[Depends(require_permissions(permission("deadlines", "list")))],
)
async def get_dashboard(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    days: int = Query(7, ge=1, le=90),
):
    use_case = GetDashboardUseCase(uow)
    return await use_case.execute(user_id, days=days)
