"""
Check Permission Use Case

Decides whether the current actor may perform one or more (resource,
action) pairs inside the active tenant, and records the decision.
"""

import logging
from datetime import datetime
from typing import Optional, Sequence, Set
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit.dtos import PermissionCheckEntry, RequestInfo
from src.app.use_cases.audit.log_permission_check_use_case import LogPermissionCheckUseCase
from src.app.use_cases.permissions.dtos import PermissionCheckResult, RequiredPermission
from src.domain.entities import AuditResult, Membership

logger = logging.getLogger(__name__)


class CheckPermissionUseCase:
    """
    Business Rules:
    - Effective set = role permissions in the current tenant
      + active direct grants - active direct denials; expired direct rows
      are ignored
    - The membership's custom_permissions map (name -> bool) is applied last
    - A required permission is held when the actor has "resource.action"
      or, when a context is given, "resource.action.context"
    - Unknown permissions are simply absent and fail the check
    - Every evaluation writes exactly one audit entry; a failed audit write
      never changes the outcome
    """

    def __init__(self, uow: UnitOfWork, audit_logger: Optional[LogPermissionCheckUseCase] = None):
        self.uow = uow
        self.audit_logger = audit_logger or LogPermissionCheckUseCase(uow)

    async def execute(
        self,
        user_id: UUID,
        required: Sequence[RequiredPermission],
        require_all: bool = False,
        context: Optional[str] = None,
        resource_id: Optional[str] = None,
        request_info: Optional[RequestInfo] = None,
    ) -> PermissionCheckResult:
        if not required:
            raise ValueError("At least one permission is required")

        async with self.uow:
            self.uow.tenant_context.assert_tenant_id()
            effective = await self.get_effective_permissions(
                user_id, self.uow.tenant_context.get_current_membership()
            )

            matches = [self.holds(effective, permission, context) for permission in required]
            granted = all(matches) if require_all else any(matches)

            required_names = [permission.name for permission in required]
            reason = "Permission granted" if granted else "Insufficient permissions"
            if not granted:
                logger.info(
                    "Permission denied for user %s in tenant %s: %s",
                    user_id,
                    self.uow.tenant_context.get_current_tenant_id(),
                    ", ".join(required_names),
                )
                if request_info is not None and request_info.response_code is None:
                    request_info = request_info.model_copy(update={"response_code": 403})

            # Structured pair of the first requirement, no name parsing
            first = required[0]
            await self.audit_logger.execute(
                PermissionCheckEntry(
                    user_id=user_id,
                    resource=first.resource,
                    action=first.action,
                    context=context,
                    resource_id=resource_id,
                    result=AuditResult.granted if granted else AuditResult.denied,
                    reason=reason,
                    metadata={"required": required_names, "require_all": require_all},
                ),
                request_info,
            )

        return PermissionCheckResult(
            granted=granted, required_permissions=required_names, reason=reason
        )

    async def get_effective_permissions(
        self, user_id: UUID, membership: Optional[Membership] = None
    ) -> Set[str]:
        """Role, direct and membership-override permissions of user_id in the current tenant"""
        effective = set(await self.uow.roles.get_permission_names_for_user(user_id))

        now = datetime.utcnow()
        denied = set()
        for name, grant in await self.uow.permissions.get_direct_grants_for_user(user_id):
            if grant.is_expired(now):
                continue
            if grant.granted:
                effective.add(name)
            else:
                denied.add(name)
        effective -= denied

        if membership is not None and membership.custom_permissions:
            for name, allowed in membership.custom_permissions.items():
                if allowed:
                    effective.add(name)
                else:
                    effective.discard(name)

        return effective

    @staticmethod
    def holds(
        effective: Set[str], permission: RequiredPermission, context: Optional[str]
    ) -> bool:
        if permission.name in effective:
            return True
        return context is not None and permission.qualified_name(context) in effective
