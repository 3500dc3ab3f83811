"""
Practice Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TenantPlan(str, Enum):
    """Subscription plan tier of a tenant"""

    free = "free"
    starter = "starter"
    pro = "pro"
    enterprise = "enterprise"


class MembershipRole(str, Enum):
    """User role within a tenant"""

    owner = "owner"
    admin = "admin"
    lawyer = "lawyer"
    assistant = "assistant"


class AuditResult(str, Enum):
    """Outcome recorded on an audit log entry"""

    granted = "granted"
    denied = "denied"


class ClientType(str, Enum):
    individual = "individual"
    company = "company"


class CaseStatus(str, Enum):
    active = "active"
    suspended = "suspended"
    archived = "archived"
    closed = "closed"


class CasePriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class DeadlineStatus(str, Enum):
    pending = "pending"
    completed = "completed"
    expired = "expired"
    cancelled = "cancelled"


class CaseEventType(str, Enum):
    filing = "filing"
    hearing = "hearing"
    decision = "decision"
    publication = "publication"
    appeal = "appeal"
    other = "other"
