import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.error import ClientError, ServerError, domain_error_response
from src.api.middleware.tenant_resolver import TenantResolverMiddleware
from src.api.request_context import RequestContextMiddleware
from src.domain.errors import DomainError

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    error_dict = {"code": exc.code, "message": exc.message}
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=exc.status_code, content={"error": error_dict})


async def handle_server_error(request: Request, exc: ServerError):
    error_dict = {"code": exc.code, "message": "Internal server error"}
    logger.error(f"Server error: {exc.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": error_dict}
    )


async def handle_domain_error(request: Request, exc: DomainError):
    return domain_error_response(exc)


def create_app(ApplicationConfig, session_factory=None, tenant_context=None) -> FastAPI:
    if session_factory is None or tenant_context is None:
        from src.depends import AsyncSessionLocal
        from src.depends import tenant_context as default_tenant_context

        session_factory = session_factory or AsyncSessionLocal
        tenant_context = tenant_context or default_tenant_context

    app = FastAPI(title="Practice API", version="0.1.0")
    app.state.config = ApplicationConfig
    app.state.session_factory = session_factory
    app.state.tenant_context = tenant_context

    # Last added runs first: CORS, request binding, tenant resolution
    app.add_middleware(
        TenantResolverMiddleware,
        session_factory=session_factory,
        tenant_context=tenant_context,
        config=ApplicationConfig,
    )
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import (
        admin,
        audit,
        cases,
        clients,
        dashboard,
        health_check,
        permissions,
        roles,
        tenant,
    )

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(tenant.router, tags=["Tenant"])
    app.include_router(tenant.onboarding_router, tags=["Onboarding"])
    app.include_router(clients.router, tags=["Clients"])
    app.include_router(cases.router, tags=["Cases"])
    app.include_router(dashboard.router, tags=["Dashboard"])
    app.include_router(roles.router, tags=["Roles"])
    app.include_router(permissions.router, tags=["Permissions"])
    app.include_router(audit.router, tags=["Audit"])
    app.include_router(admin.router, tags=["Admin"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(DomainError, handle_domain_error)

    return app
