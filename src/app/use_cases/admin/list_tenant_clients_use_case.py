"""
Use Case: List Tenant Clients (cross-tenant administration)
"""

import logging
from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.clients.dtos import ClientResponse
from src.domain.errors import TenantNotFound

logger = logging.getLogger(__name__)


class ListTenantClientsUseCase:
    """
    Read another tenant's clients through the explicit for_tenant path.

    Authorization is the admin API key, not tenant membership, so this runs
    without a tenant context.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, limit: int = 100) -> List[ClientResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if not tenant:
                raise TenantNotFound("Tenant not found")

            clients = await self.uow.clients.for_tenant(tenant_id).list(limit=limit)
            logger.info("Admin listed %d clients of tenant %s", len(clients), tenant_id)
            return [ClientResponse.from_entity(client) for client in clients]
