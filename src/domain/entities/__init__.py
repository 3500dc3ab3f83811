"""
Practice Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AuditResult,
    CaseEventType,
    CasePriority,
    CaseStatus,
    ClientType,
    DeadlineStatus,
    MembershipRole,
    TenantPlan,
)

# Export all entities
from .user import User
from .tenant import Tenant
from .membership import Membership
from .role import Role, UserRole
from .permission import Permission, RolePermission, UserPermission
from .audit_log import AuditLog
from .client import Client
from .legal_case import LegalCase
from .case_event import CaseEvent
from .deadline import Deadline
from .document import Document
from .time_entry import TimeEntry

__all__ = [
    # Enums
    "AuditResult",
    "CaseEventType",
    "CasePriority",
    "CaseStatus",
    "ClientType",
    "DeadlineStatus",
    "MembershipRole",
    "TenantPlan",
    # Entities
    "User",
    "Tenant",
    "Membership",
    "Role",
    "UserRole",
    "Permission",
    "RolePermission",
    "UserPermission",
    "AuditLog",
    "Client",
    "LegalCase",
    "CaseEvent",
    "Deadline",
    "Document",
    "TimeEntry",
]
