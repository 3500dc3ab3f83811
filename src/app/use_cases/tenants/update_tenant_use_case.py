"""
Update Tenant Use Case
"""

import logging
from datetime import datetime

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tenants.dtos import TenantInfo, UpdateTenantCommand
from src.domain.errors import Conflict, TenantNotFound

logger = logging.getLogger(__name__)


class UpdateTenantUseCase:
    """
    Business Rules:
    - Only the tenant of the current context can be updated
    - A changed subdomain must be free (SUBDOMAIN_TAKEN)
    - A changed custom domain must be free (CUSTOM_DOMAIN_TAKEN); null clears it
    - Only the fields present in the command are touched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: UpdateTenantCommand) -> TenantInfo:
        changes = command.model_dump(exclude_unset=True)

        async with self.uow:
            tenant_id = self.uow.tenant_context.assert_tenant_id()
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                raise TenantNotFound()

            subdomain = changes.get("subdomain")
            if subdomain is not None:
                subdomain = subdomain.lower()
                changes["subdomain"] = subdomain
                if subdomain != tenant.subdomain:
                    if await self.uow.tenants.get_by_subdomain(subdomain) is not None:
                        raise Conflict(
                            f"Subdomain '{subdomain}' is already taken", "SUBDOMAIN_TAKEN"
                        )

            if "custom_domain" in changes:
                custom_domain = changes["custom_domain"]
                custom_domain = custom_domain.lower() if custom_domain else None
                changes["custom_domain"] = custom_domain
                if custom_domain and custom_domain != tenant.custom_domain:
                    if await self.uow.tenants.get_by_custom_domain(custom_domain) is not None:
                        raise Conflict(
                            f"Custom domain '{custom_domain}' is already taken",
                            "CUSTOM_DOMAIN_TAKEN",
                        )

            for name, value in changes.items():
                if name in ("name", "subdomain", "plan") and value is None:
                    continue
                setattr(tenant, name, value)
            tenant.updated_at = datetime.utcnow()

            tenant = await self.uow.tenants.update(tenant)
            await self.uow.commit()

            logger.info("Updated tenant %s: %s", tenant.id, ", ".join(sorted(changes)))
            return TenantInfo.from_entity(tenant)
