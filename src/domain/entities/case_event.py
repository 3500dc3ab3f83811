"""
CaseEvent Entity

A dated entry in a case timeline (hearing, filing, decision...).
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, JSON

from ..base import TenantOwnedModel
from .enums import CaseEventType


class CaseEvent(TenantOwnedModel, table=True):
    __tablename__ = "case_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    case_id: UUID = Field(foreign_key="cases.id", nullable=False, index=True)
    event_type: CaseEventType = Field(default=CaseEventType.other)
    title: str = Field(max_length=255)
    description: Optional[str] = None
    event_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    source: str = Field(default="manual", max_length=50)
    event_metadata: Optional[dict] = Field(default=None, sa_column=Column("metadata", JSON))
    created_by: Optional[UUID] = Field(default=None, foreign_key="users.id")
