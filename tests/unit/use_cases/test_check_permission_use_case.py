from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.tenant_context import TenantContext
from src.app.use_cases.audit.dtos import RequestInfo
from src.app.use_cases.permissions import CheckPermissionUseCase, RequiredPermission
from src.domain.entities import AuditLog, AuditResult, Membership, MembershipRole, UserPermission
from src.domain.errors import MissingTenantContext


@pytest.fixture
def uow(mock_uow):
    mock_uow.roles = MagicMock()
    mock_uow.roles.get_permission_names_for_user = AsyncMock(return_value=set())

    mock_uow.permissions = MagicMock()
    mock_uow.permissions.get_direct_grants_for_user = AsyncMock(return_value=[])

    mock_uow.audit_logs = MagicMock()
    mock_uow.audit_logs.create = AsyncMock(side_effect=lambda log: log)
    return mock_uow


@pytest.fixture
def tenant_id():
    return uuid4()


@pytest.fixture
def user_id():
    return uuid4()


def required(resource, action):
    return RequiredPermission(resource=resource, action=action)


def grant(granted=True, expires_at=None):
    return UserPermission(
        user_id=uuid4(), permission_id=uuid4(), granted=granted, expires_at=expires_at
    )


async def check(uow, tenant_context, tenant_id, user_id, permissions, membership=None, **kwargs):
    context = TenantContext(tenant_id=tenant_id, user_id=user_id, membership=membership)
    use_case = CheckPermissionUseCase(uow)
    return await tenant_context.run(context, use_case.execute, user_id, permissions, **kwargs)


def written_log(uow) -> AuditLog:
    uow.audit_logs.create.assert_called_once()
    return uow.audit_logs.create.call_args.args[0]


@pytest.mark.asyncio
async def test_role_permission_grants_and_audits(uow, tenant_context, tenant_id, user_id):
    uow.roles.get_permission_names_for_user.return_value = {"clients.read", "clients.list"}

    result = await check(
        uow, tenant_context, tenant_id, user_id, [required("clients", "read")], resource_id="42"
    )

    assert result.granted is True
    log = written_log(uow)
    assert log.result == AuditResult.granted
    assert log.resource == "clients"
    assert log.action == "read"
    assert log.resource_id == "42"
    assert log.user_id == user_id
    assert log.reason == "Permission granted"
    uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_missing_permission_denies_and_audits(uow, tenant_context, tenant_id, user_id):
    uow.roles.get_permission_names_for_user.return_value = {"clients.read"}

    result = await check(
        uow,
        tenant_context,
        tenant_id,
        user_id,
        [required("clients", "delete")],
        request_info=RequestInfo(method="DELETE", url="http://test/clients/1"),
    )

    assert result.granted is False
    assert result.required_permissions == ["clients.delete"]
    log = written_log(uow)
    assert log.result == AuditResult.denied
    assert log.reason == "Insufficient permissions"
    assert log.response_code == 403
    assert log.method == "DELETE"


@pytest.mark.asyncio
async def test_unknown_permission_is_denied_not_raised(uow, tenant_context, tenant_id, user_id):
    result = await check(uow, tenant_context, tenant_id, user_id, [required("reports", "export")])

    assert result.granted is False


@pytest.mark.asyncio
async def test_require_any_vs_require_all(uow, tenant_context, tenant_id, user_id):
    uow.roles.get_permission_names_for_user.return_value = {"cases.create"}
    permissions = [required("cases", "create"), required("clients", "read")]

    any_result = await check(uow, tenant_context, tenant_id, user_id, permissions)
    all_result = await check(
        uow, tenant_context, tenant_id, user_id, permissions, require_all=True
    )

    assert any_result.granted is True
    assert all_result.granted is False
    # Audit entries use the structured first requirement
    for call in uow.audit_logs.create.call_args_list:
        assert call.args[0].resource == "cases"
        assert call.args[0].action == "create"


@pytest.mark.asyncio
async def test_direct_denial_overrides_role(uow, tenant_context, tenant_id, user_id):
    uow.roles.get_permission_names_for_user.return_value = {"clients.delete"}
    uow.permissions.get_direct_grants_for_user.return_value = [
        ("clients.delete", grant(granted=False))
    ]

    result = await check(uow, tenant_context, tenant_id, user_id, [required("clients", "delete")])

    assert result.granted is False


@pytest.mark.asyncio
async def test_expired_direct_grant_is_ignored(uow, tenant_context, tenant_id, user_id):
    uow.permissions.get_direct_grants_for_user.return_value = [
        ("audit.list", grant(expires_at=datetime.utcnow() - timedelta(days=1))),
        ("audit.read", grant(expires_at=datetime.utcnow() + timedelta(days=1))),
    ]

    expired = await check(uow, tenant_context, tenant_id, user_id, [required("audit", "list")])
    active = await check(uow, tenant_context, tenant_id, user_id, [required("audit", "read")])

    assert expired.granted is False
    assert active.granted is True


@pytest.mark.asyncio
async def test_membership_custom_permissions_apply_last(uow, tenant_context, tenant_id, user_id):
    uow.roles.get_permission_names_for_user.return_value = {"clients.delete"}
    uow.permissions.get_direct_grants_for_user.return_value = [("cases.delete", grant(False))]
    membership = Membership(
        tenant_id=tenant_id,
        user_id=user_id,
        role=MembershipRole.lawyer,
        custom_permissions={"clients.delete": False, "cases.delete": True},
    )

    clients = await check(
        uow, tenant_context, tenant_id, user_id, [required("clients", "delete")], membership
    )
    cases = await check(
        uow, tenant_context, tenant_id, user_id, [required("cases", "delete")], membership
    )

    assert clients.granted is False
    assert cases.granted is True


@pytest.mark.asyncio
async def test_context_qualified_permission(uow, tenant_context, tenant_id, user_id):
    uow.roles.get_permission_names_for_user.return_value = {"documents.read.own"}

    with_context = await check(
        uow, tenant_context, tenant_id, user_id, [required("documents", "read")], context="own"
    )
    without_context = await check(
        uow, tenant_context, tenant_id, user_id, [required("documents", "read")]
    )

    assert with_context.granted is True
    assert without_context.granted is False
    assert uow.audit_logs.create.call_args_list[0].args[0].context == "own"


@pytest.mark.asyncio
async def test_audit_failure_does_not_flip_denial(uow, tenant_context, tenant_id, user_id):
    uow.audit_logs.create.side_effect = RuntimeError("database is locked")

    result = await check(uow, tenant_context, tenant_id, user_id, [required("clients", "delete")])

    assert result.granted is False
    uow.rollback.assert_called_once()


@pytest.mark.asyncio
async def test_audit_failure_does_not_flip_grant(uow, tenant_context, tenant_id, user_id):
    uow.roles.get_permission_names_for_user.return_value = {"clients.read"}
    uow.audit_logs.create.side_effect = RuntimeError("database is locked")

    result = await check(uow, tenant_context, tenant_id, user_id, [required("clients", "read")])

    assert result.granted is True


@pytest.mark.asyncio
async def test_requires_tenant_context(uow, user_id):
    use_case = CheckPermissionUseCase(uow)

    with pytest.raises(MissingTenantContext):
        await use_case.execute(user_id, [required("clients", "read")])

    uow.audit_logs.create.assert_not_called()
