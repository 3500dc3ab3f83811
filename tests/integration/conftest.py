from typing import Optional
from uuid import UUID

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.request_context import header_tenant_id
from src.app.services.tenant_context import TenantContextStore
from src.domain.entities import Membership, MembershipRole, Role, User, UserRole
from tests.fixtures.auth_helpers import auth_headers
from tests.fixtures.json_loader import TestDataLoader


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
def tenant_context():
    return TenantContextStore(fallback_tenant_id=header_tenant_id)


@pytest_asyncio.fixture
def uow(db_session, tenant_context):
    return SqlAlchemyUnitOfWork(db_session, tenant_context)


@pytest_asyncio.fixture
async def client(session_factory, tenant_context):
    from src.api.app import create_app

    app = create_app(
        ApplicationConfig, session_factory=session_factory, tenant_context=tenant_context
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def make_user(uow):
    """Insert a user and return (user, bearer headers)"""

    async def _make_user(email: str, full_name: Optional[str] = None):
        async with uow:
            user = await uow.users.create(User(email=email, full_name=full_name))
            await uow.commit()
            # Keep the loaded row usable once the unit of work rolls back
            uow.session.expunge(user)
        return user, auth_headers(user.id)

    return _make_user


@pytest_asyncio.fixture
def onboard(client, make_user, test_data):
    """Create an owner through the onboarding endpoint; returns (tenant json, user, headers)"""

    async def _onboard(tenant_key: str, user_key: str):
        user_data = test_data.get(user_key)
        user, headers = await make_user(user_data["email"], user_data["full_name"])
        response = await client.post(
            "/onboarding/tenants", json=test_data.get(tenant_key), headers=headers
        )
        assert response.status_code == 201, response.text
        tenant = response.json()["tenant"]
        return tenant, user, auth_headers(user.id, tenant["id"])

    return _onboard


@pytest_asyncio.fixture
def add_member(db_session, make_user):
    """Join a new user to a tenant with one of its seeded roles; returns (user, headers)"""

    async def _add_member(
        tenant_id: str,
        email: str,
        role: MembershipRole = MembershipRole.assistant,
        is_active: bool = True,
        custom_permissions: Optional[dict] = None,
    ):
        user, _ = await make_user(email)
        tenant_uuid = UUID(tenant_id)
        db_session.add(
            Membership(
                tenant_id=tenant_uuid,
                user_id=user.id,
                role=role,
                is_active=is_active,
                custom_permissions=custom_permissions,
            )
        )
        result = await db_session.execute(
            select(Role).where(Role.tenant_id == tenant_uuid, Role.slug == role.value)
        )
        db_session.add(UserRole(user_id=user.id, role_id=result.scalars().one().id))
        await db_session.commit()
        return user, auth_headers(user.id, tenant_id)

    return _add_member
