"""
Document Entity

Metadata for a stored file. Storage drivers live outside this service.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field

from ..base import TenantOwnedModel


class Document(TenantOwnedModel, table=True):
    __tablename__ = "documents"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    case_id: Optional[UUID] = Field(default=None, foreign_key="cases.id", index=True)
    client_id: Optional[UUID] = Field(default=None, foreign_key="clients.id", index=True)
    uploaded_by: Optional[UUID] = Field(default=None, foreign_key="users.id")

    title: str = Field(max_length=255)
    document_type: str = Field(default="other", max_length=50)
    file_path: str = Field(max_length=1024)
    file_size: int = Field(default=0)
    mime_type: str = Field(default="application/octet-stream", max_length=255)
    original_filename: Optional[str] = Field(default=None, max_length=255)
    version: int = Field(default=1)
