"""
Audit Use Cases

All audit-related business logic.
"""

from .cleanup_old_audit_logs_use_case import CleanupOldAuditLogsUseCase
from .get_audit_logs_use_case import GetAuditLogsUseCase
from .get_security_alerts_use_case import GetSecurityAlertsUseCase
from .get_user_audit_logs_use_case import GetUserAuditLogsUseCase
from .log_permission_check_use_case import LogPermissionCheckUseCase, sanitize_request_data
from .log_user_action_use_case import LogUserActionUseCase

__all__ = [
    "CleanupOldAuditLogsUseCase",
    "GetAuditLogsUseCase",
    "GetSecurityAlertsUseCase",
    "GetUserAuditLogsUseCase",
    "LogPermissionCheckUseCase",
    "LogUserActionUseCase",
    "sanitize_request_data",
]
