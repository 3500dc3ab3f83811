"""
Audit API Routes

Handles audit log retrieval endpoints for the current tenant.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.permissions import permission, require_permissions
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit import (
    GetAuditLogsUseCase,
    GetSecurityAlertsUseCase,
    GetUserAuditLogsUseCase,
)
from src.app.use_cases.audit.dtos import AuditLogPage, AuditLogResponse
from src.depends import get_unit_of_work
from src.domain.entities import AuditResult

router = APIRouter(prefix="/audit", tags=["Audit"])


@router.get(
    "/logs",
    status_code=status.HTTP_200_OK,
    response_model=AuditLogPage,
    dependencies=[Depends(require_permissions(permission("audit", "list")))],
)
async def get_audit_logs(
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(50, ge=1, le=100, description="Maximum number of entries to return"),
    cursor: Optional[str] = Query(None, description="Pagination cursor"),
    user_id: Optional[UUID] = Query(None),
    resource: Optional[str] = Query(None),
    action: Optional[str] = Query(None),
    result: Optional[AuditResult] = Query(None),
):
    """
    Get Audit Logs

    Query Parameters:
        - limit: Maximum number of entries to return (1-100, default 50)
        - cursor: Pagination cursor for fetching next page
        - user_id, resource, action, result: optional filters

    Returns:
        - logs: Entries ordered by newest first
        - next_cursor: Cursor for next page (null if no more entries)
    """
    use_case = GetAuditLogsUseCase(uow)
    return await use_case.execute(
        limit=limit,
        cursor=cursor,
        user_id=user_id,
        resource=resource,
        action=action,
        result=result,
    )


@router.get(
    "/security-alerts",
    status_code=status.HTTP_200_OK,
    response_model=List[AuditLogResponse],
    dependencies=[Depends(require_permissions(permission("audit", "read")))],
)
async def get_security_alerts(
    uow: UnitOfWork = Depends(get_unit_of_work),
    days: int = Query(7, ge=1, le=365),
):
    """Denied permission checks of the last N days"""
    use_case = GetSecurityAlertsUseCase(uow)
    return await use_case.execute(days)


@router.get(
    "/users/{user_id}/logs",
    status_code=status.HTTP_200_OK,
    response_model=List[AuditLogResponse],
    dependencies=[
        Depends(require_permissions(permission("audit", "list"), resource_id_param="user_id"))
    ],
)
async def get_user_audit_logs(
    user_id: UUID,
    uow: UnitOfWork = Depends(get_unit_of_work),
    limit: int = Query(100, ge=1, le=500),
):
    """Latest entries recorded for one user in this tenant"""
    use_case = GetUserAuditLogsUseCase(uow)
    return await use_case.execute(user_id, limit=limit)
