from typing import Optional
from uuid import UUID

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.request_context import header_tenant_id
from src.api.utils.jwt import user_id_from_payload, verify_jwt
from src.app.services.tenant_context import TenantContextStore

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# One store per process; falls back to the request's tenant header when no
# scope is open
tenant_context = TenantContextStore(fallback_tenant_id=header_tenant_id)

security = HTTPBearer(auto_error=False)


def get_tenant_context(request: Request) -> TenantContextStore:
    return request.app.state.tenant_context


async def get_unit_of_work(request: Request):
    state = request.app.state
    async with state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(
            session, state.tenant_context, strict_reads=state.config.TENANT_STRICT_READS
        )


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id

    Raises:
        ClientError: 401 if token is missing, invalid or expired
    """
    if credentials is None:
        raise ClientError(
            "UNAUTHORIZED",
            "Authentication required",
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(credentials.credentials)
    if user_id_from_payload(payload) is None:
        raise ClientError(
            "INVALID_TOKEN",
            "Invalid or expired token",
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return payload


async def get_current_user_id(current_user: dict = Depends(get_current_user)) -> UUID:
    return UUID(current_user["user_id"])
