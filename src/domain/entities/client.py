"""
Client Entity

A person or company represented by the firm.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, JSON

from ..base import TenantOwnedModel
from .enums import ClientType


class Client(TenantOwnedModel, table=True):
    __tablename__ = "clients"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    client_type: ClientType = Field(default=ClientType.individual)
    full_name: Optional[str] = Field(default=None, max_length=255)
    company_name: Optional[str] = Field(default=None, max_length=255)
    tax_id: Optional[str] = Field(default=None, max_length=32)
    email: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    address: Optional[dict] = Field(default=None, sa_column=Column(JSON))
    tags: Optional[list] = Field(default=None, sa_column=Column(JSON))
    is_active: bool = Field(default=True)
    notes: Optional[str] = None

    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    @property
    def display_name(self) -> Optional[str]:
        if self.client_type == ClientType.company:
            return self.company_name or self.full_name
        return self.full_name or self.company_name
