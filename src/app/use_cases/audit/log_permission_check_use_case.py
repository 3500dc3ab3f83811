"""
Log Permission Check Use Case

Writes one audit entry per permission decision.
"""

import logging
from typing import Any, Dict, Iterable, Optional

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.audit.dtos import PermissionCheckEntry, RequestInfo
from src.domain.entities import AuditLog

logger = logging.getLogger(__name__)

DEFAULT_SENSITIVE_FIELDS = ("password", "token", "secret", "key", "authorization", "cookie")
DEFAULT_REDACTION_MARKER = "[REDACTED]"


def sanitize_request_data(
    data: Optional[Dict[str, Any]],
    sensitive_fields: Iterable[str] = DEFAULT_SENSITIVE_FIELDS,
    marker: str = DEFAULT_REDACTION_MARKER,
) -> Optional[Dict[str, Any]]:
    """
    Replace values of top-level keys whose lowercased name contains any
    sensitive substring. Other keys pass through untouched.
    """
    if data is None:
        return None

    fields = [field.lower() for field in sensitive_fields]
    sanitized = {}
    for key, value in data.items():
        lower_key = str(key).lower()
        if any(field in lower_key for field in fields):
            sanitized[key] = marker
        else:
            sanitized[key] = value
    return sanitized


class LogPermissionCheckUseCase:
    """
    Business Rules:
    - The entry is stamped with the tenant of the active context
    - Request payloads are sanitized before storage
    - Write failures are logged and reported as False, never raised, so they
      cannot alter the authorization decision being recorded
    """

    def __init__(
        self,
        uow: UnitOfWork,
        sensitive_fields: Iterable[str] = DEFAULT_SENSITIVE_FIELDS,
        redaction_marker: str = DEFAULT_REDACTION_MARKER,
    ):
        self.uow = uow
        self.sensitive_fields = tuple(sensitive_fields)
        self.redaction_marker = redaction_marker

    async def execute(
        self, entry: PermissionCheckEntry, request_info: Optional[RequestInfo] = None
    ) -> bool:
        audit_log = AuditLog(
            user_id=entry.user_id,
            resource=entry.resource,
            action=entry.action,
            context=entry.context,
            resource_id=entry.resource_id,
            result=entry.result,
            reason=entry.reason,
            audit_metadata=entry.metadata,
        )

        if request_info is not None:
            audit_log.ip_address = request_info.ip_address
            audit_log.user_agent = request_info.user_agent
            audit_log.method = request_info.method
            audit_log.url = request_info.url
            audit_log.response_code = request_info.response_code
            audit_log.session_id = request_info.session_id
            audit_log.request_data = sanitize_request_data(
                request_info.request_data, self.sensitive_fields, self.redaction_marker
            )

        try:
            await self.uow.audit_logs.create(audit_log)
            await self.uow.commit()
        except Exception:
            logger.exception(
                "Failed to write audit log for %s.%s (result=%s, user=%s)",
                entry.resource,
                entry.action,
                entry.result.value,
                entry.user_id,
            )
            await self.uow.rollback()
            return False

        return True
