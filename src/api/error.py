import logging

from fastapi import status
from fastapi.responses import JSONResponse

from src.domain.errors import (
    Conflict,
    CrossTenantViolation,
    DomainError,
    EntityNotFound,
    MissingTenantContext,
    PermissionDenied,
    TenantMembershipForbidden,
    TenantNotFound,
    TenantRequired,
)

logger = logging.getLogger(__name__)

DOMAIN_ERROR_STATUS = {
    TenantRequired: status.HTTP_401_UNAUTHORIZED,
    TenantNotFound: status.HTTP_404_NOT_FOUND,
    TenantMembershipForbidden: status.HTTP_403_FORBIDDEN,
    MissingTenantContext: status.HTTP_403_FORBIDDEN,
    PermissionDenied: status.HTTP_403_FORBIDDEN,
    CrossTenantViolation: status.HTTP_403_FORBIDDEN,
    EntityNotFound: status.HTTP_404_NOT_FOUND,
    Conflict: status.HTTP_409_CONFLICT,
}


class ClientError(Exception):
    def __init__(self, code: str, message: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ServerError(Exception):
    def __init__(self, code: str, message: str = "Internal server error"):
        self.code = code
        self.message = message
        super().__init__(message)


def status_for(exc: DomainError) -> int:
    for cls in type(exc).__mro__:
        if cls in DOMAIN_ERROR_STATUS:
            return DOMAIN_ERROR_STATUS[cls]
    return status.HTTP_400_BAD_REQUEST


def domain_error_response(exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    error_dict = exc.to_dict()
    logger.warning(f"Client error: {error_dict}")
    return JSONResponse(status_code=status_code, content={"error": error_dict})
