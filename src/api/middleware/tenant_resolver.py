"""
Tenant Resolver Middleware

Resolves the acting tenant before routing and runs the rest of the request
inside a TenantContextStore scope.
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import domain_error_response
from src.api.utils.jwt import user_id_from_payload, verify_jwt
from src.app.services.tenant_context import TenantContextStore
from src.app.use_cases.tenants import ResolveTenantUseCase
from src.domain.errors import DomainError

logger = logging.getLogger(__name__)


class TenantResolverMiddleware(BaseHTTPMiddleware):
    """
    Order of resolution: tenant header, host subdomain, the caller's own
    membership. Rejections are rendered here because exception handlers do
    not apply to middleware:

    - no tenant determined: 401 TENANT_REQUIRED
    - tenant missing or inactive: 404 TENANT_NOT_FOUND
    - caller not an active member: 403 TENANT_ACCESS_FORBIDDEN
    - bearer token present but invalid: 401 INVALID_TOKEN
    """

    def __init__(self, app, session_factory, tenant_context: TenantContextStore, config):
        super().__init__(app)
        self.session_factory = session_factory
        self.tenant_context = tenant_context
        self.config = config

    def is_exempt(self, path: str) -> bool:
        for prefix in self.config.TENANT_EXEMPT_PATHS:
            if path == prefix or path.startswith(prefix.rstrip("/") + "/"):
                return True
        return False

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" or self.is_exempt(request.url.path):
            return await call_next(request)

        user_id = None
        authorization = request.headers.get("Authorization")
        if authorization:
            scheme, _, token = authorization.partition(" ")
            if scheme.lower() == "bearer":
                user_id = user_id_from_payload(verify_jwt(token.strip()))
            if user_id is None:
                logger.info("Rejected invalid bearer token for %s", request.url.path)
                return JSONResponse(
                    status_code=status.HTTP_401_UNAUTHORIZED,
                    content={
                        "error": {"code": "INVALID_TOKEN", "message": "Invalid or expired token"}
                    },
                )

        try:
            async with self.session_factory() as session:
                uow = SqlAlchemyUnitOfWork(session, self.tenant_context)
                use_case = ResolveTenantUseCase(uow, self.config.LOCAL_HOST_MARKERS)
                context = await use_case.execute(
                    header_value=request.headers.get(self.config.TENANT_HEADER),
                    host=request.headers.get("host"),
                    user_id=user_id,
                )
        except DomainError as exc:
            return domain_error_response(exc)

        request.state.tenant = context.tenant
        request.state.membership = context.membership
        request.state.user_id = user_id

        return await self.tenant_context.run(context, call_next, request)
