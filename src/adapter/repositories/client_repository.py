from typing import List

from sqlalchemy import or_
from sqlmodel import select

from src.adapter.repositories.tenant_scoped_repository import TenantScopedRepository
from src.app.repositories.client_repository import IClientRepository
from src.domain.entities import Client


class ClientRepository(TenantScopedRepository[Client], IClientRepository):
    """Client repository implementation using SQLModel"""

    model = Client

    async def search(self, term: str, limit: int = 20) -> List[Client]:
        """Search clients by name, company name or email"""
        pattern = f"%{term}%"
        stmt = self._scoped(select(Client)).where(
            or_(
                Client.full_name.ilike(pattern),
                Client.company_name.ilike(pattern),
                Client.email.ilike(pattern),
            )
        )
        result = await self.session.execute(stmt.order_by(Client.full_name).limit(limit))
        return list(result.scalars().all())
