"""
Audit Use Case DTOs
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import AuditLog, AuditResult


class RequestInfo(BaseModel):
    """HTTP details captured alongside an audit entry"""

    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    method: Optional[str] = None
    url: Optional[str] = None
    response_code: Optional[int] = None
    session_id: Optional[str] = None
    request_data: Optional[Dict[str, Any]] = None


class PermissionCheckEntry(BaseModel):
    user_id: Optional[UUID] = None
    resource: str
    action: str
    context: Optional[str] = None
    resource_id: Optional[str] = None
    result: AuditResult
    reason: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


class UserActionEntry(BaseModel):
    user_id: UUID
    resource: str
    action: str
    resource_id: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    result: AuditResult = AuditResult.granted


class AuditLogResponse(BaseModel):
    id: str
    user_id: Optional[str] = None
    resource: str
    action: str
    context: Optional[str] = None
    resource_id: Optional[str] = None
    method: Optional[str] = None
    url: Optional[str] = None
    response_code: Optional[int] = None
    result: str
    reason: Optional[str] = None
    request_data: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None
    timestamp: str

    @classmethod
    def from_entity(cls, log: AuditLog) -> "AuditLogResponse":
        return cls(
            id=str(log.id),
            user_id=str(log.user_id) if log.user_id else None,
            resource=log.resource,
            action=log.action,
            context=log.context,
            resource_id=log.resource_id,
            method=log.method,
            url=log.url,
            response_code=log.response_code,
            result=log.result.value,
            reason=log.reason,
            request_data=log.request_data,
            metadata=log.audit_metadata,
            timestamp=log.created_at.isoformat() + "Z",
        )


class AuditLogPage(BaseModel):
    logs: List[AuditLogResponse]
    next_cursor: Optional[str] = None


class CleanupResponse(BaseModel):
    deleted: int
    cutoff: datetime
    tenant_id: Optional[str] = None
