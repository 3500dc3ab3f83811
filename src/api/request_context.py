"""
Ambient access to the inbound request.

Code that is not handed the Request (repositories, the tenant context
store's header fallback) reads it from here.
"""

from contextvars import ContextVar
from typing import Optional
from uuid import UUID

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from config import ApplicationConfig

_current_request: ContextVar[Optional[Request]] = ContextVar("current_request", default=None)


def get_current_request() -> Optional[Request]:
    return _current_request.get()


def header_tenant_id() -> Optional[UUID]:
    """Tenant header of the current request as a UUID; None when absent or malformed"""
    request = get_current_request()
    if request is None:
        return None

    value = request.headers.get(ApplicationConfig.TENANT_HEADER)
    if not value:
        return None
    try:
        return UUID(value.strip())
    except ValueError:
        return None


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds the current Request for the lifetime of the request"""

    async def dispatch(self, request: Request, call_next):
        token = _current_request.set(request)
        try:
            return await call_next(request)
        finally:
            _current_request.reset(token)
