"""
Resolve Tenant Use Case

Determines and validates the acting tenant for one inbound request.
"""

import logging
from typing import Iterable, Optional
from uuid import UUID

from src.app.services.tenant_context import TenantContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import TenantMembershipForbidden, TenantNotFound, TenantRequired

logger = logging.getLogger(__name__)


def extract_subdomain(host: Optional[str], local_markers: Iterable[str] = ("localhost",)) -> Optional[str]:
    """
    Candidate subdomain of a request host.

    Development hosts (containing a local marker) need two labels, production
    hosts need three; the first label is the candidate.

        acme.example.com      -> "acme"
        acme.localhost:3333   -> "acme"
        example.com           -> None
    """
    if not host:
        return None

    hostname = host.split(":", 1)[0].strip().lower()
    labels = [label for label in hostname.split(".") if label]

    if any(marker in hostname for marker in local_markers):
        return labels[0] if len(labels) > 1 else None

    return labels[0] if len(labels) >= 3 else None


class ResolveTenantUseCase:
    """
    Use case for resolving the request tenant.

    Precedence (first match wins):
    1. Explicit tenant header
    2. Host subdomain (one that matches no tenant falls through)
    3. Authenticated user's first active membership

    Validation:
    - Tenant must exist and be active (TenantNotFound)
    - An authenticated caller must hold an active membership in it
      (TenantMembershipForbidden)
    - Nothing matched at all (TenantRequired)
    """

    def __init__(self, uow: UnitOfWork, local_markers: Iterable[str] = ("localhost",)):
        self.uow = uow
        self.local_markers = tuple(local_markers)

    async def execute(
        self,
        header_value: Optional[str] = None,
        host: Optional[str] = None,
        user_id: Optional[UUID] = None,
    ) -> TenantContext:
        async with self.uow:
            tenant = await self._find_candidate(header_value, host, user_id)

            membership = None
            if user_id is not None:
                membership = await self.uow.memberships.get_active_by_user_and_tenant(
                    user_id, tenant.id
                )
                if membership is None:
                    logger.info(
                        "Rejected user %s: no active membership in tenant %s",
                        user_id,
                        tenant.id,
                    )
                    raise TenantMembershipForbidden()

            # End the read transaction so the loaded rows stay usable once the
            # session is closed
            await self.uow.commit()

            return TenantContext(
                tenant_id=tenant.id,
                tenant=tenant,
                user_id=user_id,
                membership=membership,
            )

    async def _find_candidate(self, header_value, host, user_id):
        if header_value:
            try:
                tenant_id = UUID(header_value.strip())
            except ValueError:
                logger.info("Rejected malformed tenant header %r", header_value)
                raise TenantNotFound()
            return await self._load_active(tenant_id)

        subdomain = extract_subdomain(host, self.local_markers)
        if subdomain:
            tenant = await self.uow.tenants.get_by_subdomain(subdomain)
            if tenant is not None:
                if not tenant.is_active:
                    logger.info("Rejected inactive subdomain %r", subdomain)
                    raise TenantNotFound()
                return tenant
            # Hosts like www.example.com name no tenant; keep looking
            logger.debug("No tenant for subdomain %r", subdomain)

        if user_id is not None:
            membership = await self.uow.memberships.get_first_active_for_user(user_id)
            if membership is not None:
                return await self._load_active(membership.tenant_id)

        logger.info("Rejected request: no tenant could be determined (host=%r)", host)
        raise TenantRequired()

    async def _load_active(self, tenant_id: UUID):
        tenant = await self.uow.tenants.get_active_by_id(tenant_id)
        if tenant is None:
            logger.info("Rejected unknown or inactive tenant %s", tenant_id)
            raise TenantNotFound()
        return tenant
