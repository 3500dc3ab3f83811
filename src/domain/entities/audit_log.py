"""
AuditLog Entity

Immutable record of one permission decision or user action.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, Field, Index, JSON

from ..base import TenantOwnedModel
from .enums import AuditResult


class AuditLog(TenantOwnedModel, table=True):
    """
    AuditLog entity - tenant-scoped audit trail.

    Business Rules:
    - Written only by the permission-check and action-logging paths
    - Never updated
    - Deleted only by the retention cleanup job, by age
    - request_data holds the sanitized inbound payload
    """

    __tablename__ = "audit_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: Optional[UUID] = Field(default=None, index=True)
    session_id: Optional[str] = Field(default=None, max_length=255)
    ip_address: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=500)

    resource: str = Field(max_length=100)
    action: str = Field(max_length=100)
    context: Optional[str] = Field(default=None, max_length=50)
    resource_id: Optional[str] = Field(default=None, max_length=64)

    method: Optional[str] = Field(default=None, max_length=10)
    url: Optional[str] = Field(default=None, max_length=2048)
    request_data: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    response_code: Optional[int] = None

    result: AuditResult = Field(default=AuditResult.granted)
    reason: Optional[str] = Field(default=None, max_length=500)
    audit_metadata: Optional[dict] = Field(
        default=None, sa_column=Column("metadata", JSON)
    )

    __table_args__ = (
        Index("idx_audit_logs_created_at", "created_at"),
        Index("idx_audit_logs_tenant_result", "tenant_id", "result"),
        Index("idx_audit_logs_tenant_resource_action", "tenant_id", "resource", "action"),
    )
