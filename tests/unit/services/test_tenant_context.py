import asyncio
from uuid import UUID, uuid4

import pytest

from src.app.services.tenant_context import TenantContext, TenantContextStore
from src.domain.errors import MissingTenantContext


def make_context(tenant_id=None, user_id=None) -> TenantContext:
    return TenantContext(tenant_id=tenant_id or uuid4(), user_id=user_id)


def test_accessors_without_context_return_none(tenant_context):
    assert tenant_context.has_context() is False
    assert tenant_context.get_context() is None
    assert tenant_context.get_current_tenant_id() is None
    assert tenant_context.get_current_tenant() is None
    assert tenant_context.get_current_user_id() is None
    assert tenant_context.get_current_membership() is None


def test_assert_tenant_id_without_context_raises(tenant_context):
    with pytest.raises(MissingTenantContext) as exc_info:
        tenant_context.assert_tenant_id()

    assert exc_info.value.code == "MISSING_TENANT_CONTEXT"


def test_assert_context_without_context_raises(tenant_context):
    with pytest.raises(MissingTenantContext):
        tenant_context.assert_context()


def test_context_requires_tenant_id():
    with pytest.raises(ValueError):
        TenantContext(tenant_id=None)


@pytest.mark.asyncio
async def test_run_exposes_context_and_returns_result(tenant_context):
    context = make_context(user_id=uuid4())

    async def body(value):
        assert tenant_context.has_context()
        assert tenant_context.assert_context() is context
        assert tenant_context.get_current_user_id() == context.user_id
        return value * 2

    result = await tenant_context.run(context, body, 21)

    assert result == 42
    assert tenant_context.has_context() is False


@pytest.mark.asyncio
async def test_run_accepts_plain_callable(tenant_context):
    context = make_context()

    result = await tenant_context.run(context, tenant_context.get_current_tenant_id)

    assert result == context.tenant_id


@pytest.mark.asyncio
async def test_nested_run_restores_outer_context(tenant_context):
    tenant_a, tenant_b, tenant_c = uuid4(), uuid4(), uuid4()
    seen = []

    async def innermost():
        seen.append(tenant_context.get_current_tenant_id())

    async def inner():
        seen.append(tenant_context.get_current_tenant_id())
        await tenant_context.run(make_context(tenant_c), innermost)
        seen.append(tenant_context.get_current_tenant_id())

    async def outer():
        seen.append(tenant_context.get_current_tenant_id())
        await tenant_context.run(make_context(tenant_b), inner)
        seen.append(tenant_context.get_current_tenant_id())

    await tenant_context.run(make_context(tenant_a), outer)

    assert seen == [tenant_a, tenant_b, tenant_c, tenant_b, tenant_a]
    assert tenant_context.get_current_tenant_id() is None


@pytest.mark.asyncio
async def test_context_restored_after_exception(tenant_context):
    outer = make_context()

    async def failing():
        raise RuntimeError("boom")

    async def body():
        with pytest.raises(RuntimeError):
            await tenant_context.run(make_context(), failing)
        return tenant_context.get_current_tenant_id()

    assert await tenant_context.run(outer, body) == outer.tenant_id
    assert tenant_context.has_context() is False


@pytest.mark.asyncio
async def test_context_survives_suspension_points(tenant_context):
    context = make_context()

    async def step():
        await asyncio.sleep(0)
        return tenant_context.get_current_tenant_id()

    async def body():
        observed = []
        for _ in range(5):
            observed.append(await step())
            await asyncio.sleep(0.001)
        return observed

    observed = await tenant_context.run(context, body)

    assert observed == [context.tenant_id] * 5


@pytest.mark.asyncio
async def test_concurrent_chains_are_isolated(tenant_context):
    tenants = [uuid4() for _ in range(10)]

    async def body(expected: UUID):
        observed = []
        for _ in range(3):
            await asyncio.sleep(0.001)
            observed.append(tenant_context.get_current_tenant_id())
        return expected, observed

    results = await asyncio.gather(
        *(tenant_context.run(make_context(tenant_id), body, tenant_id) for tenant_id in tenants)
    )

    for expected, observed in results:
        assert observed == [expected] * 3


@pytest.mark.asyncio
async def test_context_propagates_to_spawned_tasks(tenant_context):
    context = make_context()

    async def child():
        await asyncio.sleep(0)
        return tenant_context.get_current_tenant_id()

    async def body():
        task = asyncio.create_task(child())
        return await task

    assert await tenant_context.run(context, body) == context.tenant_id


@pytest.mark.asyncio
async def test_context_propagates_to_scheduled_callbacks(tenant_context):
    context = make_context()
    loop = asyncio.get_running_loop()

    async def body():
        future = loop.create_future()
        loop.call_soon(lambda: future.set_result(tenant_context.get_current_tenant_id()))
        return await future

    assert await tenant_context.run(context, body) == context.tenant_id


@pytest.mark.asyncio
async def test_task_spawned_outside_scope_does_not_see_context(tenant_context):
    started = asyncio.Event()
    release = asyncio.Event()

    async def sibling():
        started.set()
        await release.wait()
        return tenant_context.get_current_tenant_id()

    task = asyncio.create_task(sibling())
    await started.wait()

    async def body():
        release.set()
        return await task

    assert await tenant_context.run(make_context(), body) is None


def test_scope_context_manager(tenant_context):
    context = make_context()

    with tenant_context.scope(context) as active:
        assert active is context
        assert tenant_context.assert_tenant_id() == context.tenant_id

    assert tenant_context.has_context() is False


def test_fallback_used_only_without_context():
    header_tenant = uuid4()
    store = TenantContextStore(fallback_tenant_id=lambda: header_tenant)

    assert store.get_current_tenant_id() == header_tenant
    assert store.assert_tenant_id() == header_tenant
    # Accessors other than the tenant id never consult the fallback
    assert store.get_current_tenant() is None
    assert store.has_context() is False

    context = make_context()
    with store.scope(context):
        assert store.get_current_tenant_id() == context.tenant_id


@pytest.mark.asyncio
async def test_run_as_switches_tenant_keeping_actor(tenant_context):
    user_id = uuid4()
    outer = make_context(user_id=user_id)
    other_tenant = uuid4()

    async def as_other():
        return tenant_context.get_current_tenant_id(), tenant_context.get_current_user_id()

    async def body():
        switched = await tenant_context.run_as(other_tenant, as_other)
        return switched, tenant_context.get_current_tenant_id()

    (switched_tenant, switched_user), restored = await tenant_context.run(outer, body)

    assert switched_tenant == other_tenant
    assert switched_user == user_id
    assert restored == outer.tenant_id


def test_separate_stores_do_not_share_state():
    first = TenantContextStore()
    second = TenantContextStore()

    with first.scope(make_context()):
        assert first.has_context() is True
        assert second.has_context() is False


@pytest.mark.asyncio
async def test_body_keywords_may_reuse_parameter_names(tenant_context):
    async def body(context=None, tenant_id=None, body=None):
        return context, tenant_id, body

    tenant_id = uuid4()

    ran = await tenant_context.run(make_context(), body, context="own", body="payload")
    switched = await tenant_context.run_as(tenant_id, body, tenant_id="inner")

    assert ran == ("own", None, "payload")
    assert switched == (None, "inner", None)


@pytest.mark.asyncio
async def test_run_as_logs_the_switch_as_warning(tenant_context, caplog):
    target = uuid4()

    with caplog.at_level("WARNING", logger="src.app.services.tenant_context"):
        await tenant_context.run_as(target, lambda: None)

    assert [record.levelname for record in caplog.records] == ["WARNING"]
    assert str(target) in caplog.records[0].getMessage()
