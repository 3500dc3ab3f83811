"""
Create Tenant Use Case

Onboards a new firm: tenant record, owner membership, default permissions
and roles.
"""

import logging
from datetime import datetime, timedelta
from uuid import UUID

from src.app.services.tenant_context import TenantContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.permissions.create_default_roles_use_case import CreateDefaultRolesUseCase
from src.app.use_cases.permissions.sync_default_permissions_use_case import (
    SyncDefaultPermissionsUseCase,
)
from src.app.use_cases.tenants.dtos import (
    CreateTenantCommand,
    CreateTenantResponse,
    MembershipInfo,
    TenantInfo,
)
from src.domain.entities import Membership, MembershipRole, Tenant
from src.domain.errors import Conflict, EntityNotFound

logger = logging.getLogger(__name__)


class CreateTenantUseCase:
    """
    Business Rules:
    - Subdomain must be unique (SUBDOMAIN_TAKEN)
    - Custom domain must be unique when given (CUSTOM_DOMAIN_TAKEN)
    - The tenant starts active with a trial of trial_days
    - The creating user becomes owner with an active membership
    - Default permissions and roles are seeded inside the new tenant's
      context, so every seeded record is stamped automatically
    - Everything happens in one transaction
    """

    def __init__(self, uow: UnitOfWork, trial_days: int = 14):
        self.uow = uow
        self.trial_days = trial_days

    async def execute(self, user_id: UUID, command: CreateTenantCommand) -> CreateTenantResponse:
        async with self.uow:
            user = await self.uow.users.get_active_by_id(user_id)
            if user is None:
                raise EntityNotFound("user", user_id)

            subdomain = command.subdomain.lower()
            if await self.uow.tenants.get_by_subdomain(subdomain):
                raise Conflict(f"Subdomain '{subdomain}' is already taken", "SUBDOMAIN_TAKEN")

            custom_domain = command.custom_domain.lower() if command.custom_domain else None
            if custom_domain and await self.uow.tenants.get_by_custom_domain(custom_domain):
                raise Conflict(
                    f"Custom domain '{custom_domain}' is already taken", "CUSTOM_DOMAIN_TAKEN"
                )

            now = datetime.utcnow()
            tenant = await self.uow.tenants.create(
                Tenant(
                    name=command.name,
                    subdomain=subdomain,
                    custom_domain=custom_domain,
                    plan=command.plan,
                    limits=command.limits,
                    is_active=True,
                    trial_ends_at=now + timedelta(days=self.trial_days),
                )
            )

            membership = await self.uow.memberships.create(
                Membership(
                    tenant_id=tenant.id,
                    user_id=user_id,
                    role=MembershipRole.owner,
                    is_active=True,
                    invited_at=now,
                    joined_at=now,
                )
            )

            context = TenantContext(
                tenant_id=tenant.id, tenant=tenant, user_id=user_id, membership=membership
            )
            permissions, roles = await self.uow.tenant_context.run(
                context, self._seed, user_id
            )

            await self.uow.commit()

        logger.info("Created tenant %s (%s) owned by user %s", tenant.id, subdomain, user_id)
        return CreateTenantResponse(
            tenant=TenantInfo.from_entity(tenant),
            membership=MembershipInfo.from_entity(membership),
            roles=sorted(roles),
            permissions_seeded=len(permissions),
        )

    async def _seed(self, user_id: UUID):
        permissions = await SyncDefaultPermissionsUseCase(self.uow).seed()
        roles = await CreateDefaultRolesUseCase(self.uow).seed(permissions)
        await self.uow.roles.assign_to_user(user_id, roles[MembershipRole.owner.value])
        return permissions, roles
