"""
Get Current Tenant Use Case
"""

from src.app.services.tenant_context import TenantContextStore
from src.app.use_cases.tenants.dtos import CurrentTenantResponse, MembershipInfo, TenantInfo
from src.domain.errors import TenantNotFound


class GetCurrentTenantUseCase:
    """Tenant and membership of the active context; no database access"""

    def __init__(self, tenant_context: TenantContextStore):
        self.tenant_context = tenant_context

    async def execute(self) -> CurrentTenantResponse:
        self.tenant_context.assert_context()

        tenant = self.tenant_context.get_current_tenant()
        if tenant is None:
            raise TenantNotFound()

        membership = self.tenant_context.get_current_membership()
        return CurrentTenantResponse(
            tenant=TenantInfo.from_entity(tenant),
            membership=MembershipInfo.from_entity(membership) if membership else None,
        )
