"""
Client API Routes

Every endpoint runs inside the resolved tenant; repositories confine reads
and writes to it.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status

from src.api.permissions import permission, require_permissions
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import LogUserActionUseCase
from src.app.use_cases.audit.dtos import UserActionEntry
from src.app.use_cases.clients import (
    ClientListResponse,
    ClientResponse,
    CreateClientCommand,
    CreateClientUseCase,
    DeleteClientUseCase,
    GetClientUseCase,
    ListClientsUseCase,
    UpdateClientCommand,
    UpdateClientUseCase,
)
from src.depends import get_current_user_id, get_unit_of_work

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    response_model=ClientListResponse,
    dependencies=[Depends(require_permissions(permission("clients", "list")))],
)
async def list_clients(
    uow: UnitOfWork = Depends(get_unit_of_work),
    page: int = Query(1, ge=1),
    per_page: int = Query(20, ge=1, le=100),
    search: Optional[str] = Query(None, min_length=1),
):
    use_case = ListClientsUseCase(uow)
    return await use_case.execute(page=page, per_page=per_page, search=search)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ClientResponse,
    dependencies=[Depends(require_permissions(permission("clients", "create")))],
)
async def create_client(
    command: CreateClientCommand,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = CreateClientUseCase(uow)
    return await use_case.execute(user_id, command)


@router.get(
    "/{client_id}",
    status_code=status.HTTP_200_OK,
    response_model=ClientResponse,
    dependencies=[
        Depends(require_permissions(permission("clients", "read"), resource_id_param="client_id"))
    ],
)
async def get_client(client_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Raises:
        - 404 Not Found: CLIENT_NOT_FOUND (also for clients of other tenants)
    """
    use_case = GetClientUseCase(uow)
    return await use_case.execute(client_id)


@router.patch(
    "/{client_id}",
    status_code=status.HTTP_200_OK,
    response_model=ClientResponse,
    dependencies=[
        Depends(require_permissions(permission("clients", "update"), resource_id_param="client_id"))
    ],
)
async def update_client(
    client_id: UUID,
    command: UpdateClientCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = UpdateClientUseCase(uow)
    return await use_case.execute(client_id, command)


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[
        Depends(require_permissions(permission("clients", "delete"), resource_id_param="client_id"))
    ],
)
async def delete_client(
    client_id: UUID,
    request: Request,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = DeleteClientUseCase(uow)
    await use_case.execute(client_id)

    await LogUserActionUseCase(uow).execute(
        UserActionEntry(
            user_id=user_id,
            resource="clients",
            action="deleted",
            resource_id=str(client_id),
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
