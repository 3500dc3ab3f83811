"""
Client Use Case DTOs
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, EmailStr, Field

from src.domain.entities import Client, ClientType


class CreateClientCommand(BaseModel):
    client_type: ClientType = ClientType.individual
    full_name: Optional[str] = Field(default=None, max_length=255)
    company_name: Optional[str] = Field(default=None, max_length=255)
    tax_id: Optional[str] = Field(default=None, max_length=32)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=32)
    address: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None
    notes: Optional[str] = None


class UpdateClientCommand(BaseModel):
    full_name: Optional[str] = Field(default=None, max_length=255)
    company_name: Optional[str] = Field(default=None, max_length=255)
    tax_id: Optional[str] = Field(default=None, max_length=32)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=32)
    address: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None
    notes: Optional[str] = None
    is_active: Optional[bool] = None


class ClientResponse(BaseModel):
    id: str
    tenant_id: str
    client_type: str
    display_name: Optional[str] = None
    full_name: Optional[str] = None
    company_name: Optional[str] = None
    tax_id: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Dict[str, Any]] = None
    tags: Optional[List[str]] = None
    notes: Optional[str] = None
    is_active: bool
    created_at: str

    @classmethod
    def from_entity(cls, client: Client) -> "ClientResponse":
        return cls(
            id=str(client.id),
            tenant_id=str(client.tenant_id),
            client_type=client.client_type.value,
            display_name=client.display_name,
            full_name=client.full_name,
            company_name=client.company_name,
            tax_id=client.tax_id,
            email=client.email,
            phone=client.phone,
            address=client.address,
            tags=client.tags,
            notes=client.notes,
            is_active=client.is_active,
            created_at=client.created_at.isoformat(),
        )


class ClientListResponse(BaseModel):
    clients: List[ClientResponse]
    total: int
    page: int
    per_page: int
    last_page: int
