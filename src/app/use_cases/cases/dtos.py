"""
Case Use Case DTOs
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import CaseEvent, CasePriority, CaseStatus, Document, LegalCase


class CreateCaseCommand(BaseModel):
    client_id: UUID
    title: str = Field(..., min_length=1, max_length=255)
    case_number: Optional[str] = Field(default=None, max_length=64)
    internal_number: Optional[str] = Field(default=None, max_length=64)
    case_type: Optional[str] = Field(default=None, max_length=50)
    court: Optional[str] = Field(default=None, max_length=255)
    priority: CasePriority = CasePriority.medium
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    case_value: Optional[Decimal] = None
    filed_at: Optional[datetime] = None
    responsible_lawyer_id: Optional[UUID] = None


class CaseEventResponse(BaseModel):
    id: str
    event_type: str
    title: str
    description: Optional[str] = None
    event_date: str

    @classmethod
    def from_entity(cls, event: CaseEvent) -> "CaseEventResponse":
        return cls(
            id=str(event.id),
            event_type=event.event_type.value,
            title=event.title,
            description=event.description,
            event_date=event.event_date.isoformat(),
        )


class DocumentSummary(BaseModel):
    id: str
    title: str
    document_type: str
    version: int

    @classmethod
    def from_entity(cls, document: Document) -> "DocumentSummary":
        return cls(
            id=str(document.id),
            title=document.title,
            document_type=document.document_type,
            version=document.version,
        )


class CaseResponse(BaseModel):
    id: str
    tenant_id: str
    client_id: str
    title: str
    case_number: Optional[str] = None
    internal_number: Optional[str] = None
    case_type: Optional[str] = None
    court: Optional[str] = None
    status: str
    priority: str
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    case_value: Optional[str] = None
    responsible_lawyer_id: Optional[str] = None
    created_at: str
    timeline: Optional[List[CaseEventResponse]] = None
    documents: Optional[List[DocumentSummary]] = None

    @classmethod
    def from_entity(
        cls,
        case: LegalCase,
        timeline: Optional[List[CaseEvent]] = None,
        documents: Optional[List[Document]] = None,
    ) -> "CaseResponse":
        return cls(
            id=str(case.id),
            tenant_id=str(case.tenant_id),
            client_id=str(case.client_id),
            title=case.title,
            case_number=case.case_number,
            internal_number=case.internal_number,
            case_type=case.case_type,
            court=case.court,
            status=case.status.value,
            priority=case.priority.value,
            description=case.description,
            tags=case.tags,
            case_value=str(case.case_value) if case.case_value is not None else None,
            responsible_lawyer_id=(
                str(case.responsible_lawyer_id) if case.responsible_lawyer_id else None
            ),
            created_at=case.created_at.isoformat(),
            timeline=(
                [CaseEventResponse.from_entity(e) for e in timeline]
                if timeline is not None
                else None
            ),
            documents=(
                [DocumentSummary.from_entity(d) for d in documents]
                if documents is not None
                else None
            ),
        )


class CaseListResponse(BaseModel):
    cases: List[CaseResponse]
    total: int
    page: int
    per_page: int
    last_page: int
