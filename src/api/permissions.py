"""
Permission Dependency

Route guard evaluating the caller's permissions in the active tenant:

    @router.get(
        "/clients",
        dependencies=[Depends(require_permissions(RequiredPermission(resource="clients", action="list")))],
    )
"""

from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import Depends, Request

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit.dtos import RequestInfo
from src.app.use_cases.audit.log_permission_check_use_case import LogPermissionCheckUseCase
from src.app.use_cases.permissions import (
    CheckPermissionUseCase,
    PermissionCheckResult,
    RequiredPermission,
)
from src.depends import get_current_user_id, get_unit_of_work
from src.domain.errors import PermissionDenied


def permission(resource: str, action: str) -> RequiredPermission:
    return RequiredPermission(resource=resource, action=action)


async def collect_request_data(request: Request) -> Dict[str, Any]:
    """Query, path and JSON body parameters merged into one dict"""
    data: Dict[str, Any] = dict(request.query_params)
    data.update(request.path_params)

    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            data.update(body)

    return data


def require_permissions(
    *required: RequiredPermission,
    require_all: bool = False,
    context: Optional[str] = None,
    resource_id_param: Optional[str] = None,
):
    if not required:
        raise ValueError("require_permissions() needs at least one permission")

    async def dependency(
        request: Request,
        user_id: UUID = Depends(get_current_user_id),
        uow: UnitOfWork = Depends(get_unit_of_work),
    ) -> PermissionCheckResult:
        config = request.app.state.config
        resource_id = None
        if resource_id_param is not None:
            value = request.path_params.get(resource_id_param)
            resource_id = str(value) if value is not None else None

        request_info = RequestInfo(
            ip_address=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent"),
            method=request.method,
            url=str(request.url),
            request_data=await collect_request_data(request),
        )

        use_case = CheckPermissionUseCase(
            uow,
            LogPermissionCheckUseCase(
                uow,
                sensitive_fields=config.AUDIT_SENSITIVE_FIELDS,
                redaction_marker=config.AUDIT_REDACTION_MARKER,
            ),
        )
        result = await use_case.execute(
            user_id,
            list(required),
            require_all=require_all,
            context=context,
            resource_id=resource_id,
            request_info=request_info,
        )
        if not result.granted:
            raise PermissionDenied(result.required_permissions)
        return result

    return dependency
