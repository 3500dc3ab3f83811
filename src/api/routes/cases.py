"""
Case API Routes
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.permissions import permission, require_permissions
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.cases import (
    CaseListResponse,
    CaseResponse,
    CreateCaseCommand,
    CreateCaseUseCase,
    GetCaseUseCase,
    ListCasesUseCase,
)
from src.depends import get_current_user_id, get_unit_of_work
from src.domain.entities import CaseStatus

router = APIRouter(prefix="/cases", tags=["Cases"])


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=CaseListResponse,
    dependencies=[Depends(require_permissions(permission("cases", "list")))],
)
async def list_cases(
    uow: UnitOfWork = Depends(get_unit_of_work),
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    client_id: Optional[UUID] = Query(None),
    case_status: Optional[CaseStatus] = Query(None, alias="status"),
):
    use_case = ListCasesUseCase(uow)
    return await use_case.execute(
        page=page, per_page=per_page, client_id=client_id, status=case_status
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=CaseResponse,
    dependencies=[
        Depends(
            require_permissions(
                permission("cases", "create"), permission("clients", "read"), require_all=True
            )
        )
    ],
)
async def create_case(
    command: CreateCaseCommand,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Raises:
        - 404 Not Found: CLIENT_NOT_FOUND when the client is not in this tenant
    """
    use_case = CreateCaseUseCase(uow)
    return await use_case.execute(user_id, command)


@router.get(
    "/{case_id}",
    status_code=status.HTTP_200_OK,
    response_model=CaseResponse,
    dependencies=[
        Depends(require_permissions(permission("cases", "read"), resource_id_param="case_id"))
    ],
)
async def get_case(case_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = GetCaseUseCase(uow)
    return await use_case.execute(case_id)
