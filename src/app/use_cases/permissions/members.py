from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Membership
from src.domain.errors import EntityNotFound


async def require_member(uow: UnitOfWork, user_id: UUID) -> Membership:
    """Active membership of user_id in the current tenant (MEMBER_NOT_FOUND otherwise)"""
    tenant_id = uow.tenant_context.assert_tenant_id()
    membership = await uow.memberships.get_active_by_user_and_tenant(user_id, tenant_id)
    if membership is None:
        raise EntityNotFound("member", user_id)
    return membership
