"""
Deadline Entity

A procedural due date attached to a case.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field

from ..base import TenantOwnedModel
from .enums import DeadlineStatus


class Deadline(TenantOwnedModel, table=True):
    __tablename__ = "deadlines"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    case_id: UUID = Field(foreign_key="cases.id", nullable=False, index=True)
    responsible_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    title: str = Field(max_length=255)
    description: Optional[str] = None
    deadline_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    is_fatal: bool = Field(default=False)
    status: DeadlineStatus = Field(default=DeadlineStatus.pending)

    completed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    completion_notes: Optional[str] = None
