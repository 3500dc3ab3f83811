"""
Tenant Management Use Cases

All tenant-related business logic.
"""

from .create_tenant_use_case import CreateTenantUseCase
from .dtos import (
    CreateTenantCommand,
    CreateTenantResponse,
    CurrentTenantResponse,
    MembershipInfo,
    TenantInfo,
    TenantListResponse,
    UpdateTenantCommand,
)
from .get_current_tenant_use_case import GetCurrentTenantUseCase
from .list_user_tenants_use_case import ListUserTenantsUseCase
from .resolve_tenant_use_case import ResolveTenantUseCase, extract_subdomain
from .update_tenant_use_case import UpdateTenantUseCase

__all__ = [
    "CreateTenantUseCase",
    "GetCurrentTenantUseCase",
    "ListUserTenantsUseCase",
    "ResolveTenantUseCase",
    "UpdateTenantUseCase",
    "extract_subdomain",
    "CreateTenantCommand",
    "CreateTenantResponse",
    "CurrentTenantResponse",
    "MembershipInfo",
    "TenantInfo",
    "TenantListResponse",
    "UpdateTenantCommand",
]
