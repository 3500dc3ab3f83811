"""
LegalCase Entity

A matter handled by the firm for a client. Stored in the "cases" table.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, JSON

from ..base import TenantOwnedModel
from .enums import CasePriority, CaseStatus


class LegalCase(TenantOwnedModel, table=True):
    __tablename__ = "cases"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    client_id: UUID = Field(foreign_key="clients.id", nullable=False, index=True)
    responsible_lawyer_id: Optional[UUID] = Field(default=None, foreign_key="users.id")

    title: str = Field(max_length=255)
    case_number: Optional[str] = Field(default=None, max_length=64, index=True)
    internal_number: Optional[str] = Field(default=None, max_length=64)
    case_type: Optional[str] = Field(default=None, max_length=50)
    court: Optional[str] = Field(default=None, max_length=255)

    status: CaseStatus = Field(default=CaseStatus.active)
    priority: CasePriority = Field(default=CasePriority.medium)

    description: Optional[str] = None
    tags: Optional[list] = Field(default=None, sa_column=Column(JSON))
    case_value: Optional[Decimal] = Field(default=None, max_digits=14, decimal_places=2)

    filed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    closed_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
