"""
Admin API Key Authentication

Validates admin API keys for system administration endpoints.
"""

from fastapi import Header, status

from config import ApplicationConfig
from src.api.error import ClientError


async def verify_admin_api_key(x_admin_api_key: str = Header(None)):
    """
    Verify admin API key from X-Admin-API-Key header.

    This is used for billing, support tooling and other internal service
    integrations. Different from user JWT authentication - this is
    service-to-service auth, and it is what authorizes the cross-tenant
    admin endpoints.

    Raises:
        ClientError: 401 if key is missing or invalid

    Returns:
        True if valid
    """
    if not x_admin_api_key:
        raise ClientError(
            "UNAUTHORIZED",
            "Admin API key required",
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if x_admin_api_key != ApplicationConfig.ADMIN_API_KEY:
        raise ClientError(
            "INVALID_API_KEY",
            "Invalid admin API key",
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return True
