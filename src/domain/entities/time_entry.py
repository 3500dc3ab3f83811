"""
TimeEntry Entity

Billable (or not) time tracked by a user against a case.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field

from ..base import TenantOwnedModel


class TimeEntry(TenantOwnedModel, table=True):
    __tablename__ = "time_entries"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    case_id: UUID = Field(foreign_key="cases.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    started_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    ended_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    duration_minutes: Optional[int] = None
    description: Optional[str] = None
    billable: bool = Field(default=True)
    hourly_rate: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
