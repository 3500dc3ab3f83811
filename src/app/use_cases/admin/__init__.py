"""Admin use cases for system administration operations."""

from .list_tenant_clients_use_case import ListTenantClientsUseCase
from .restore_tenant_use_case import RestoreTenantResponse, RestoreTenantUseCase
from .suspend_tenant_use_case import SuspendTenantResponse, SuspendTenantUseCase

__all__ = [
    "SuspendTenantUseCase",
    "SuspendTenantResponse",
    "RestoreTenantUseCase",
    "RestoreTenantResponse",
    "ListTenantClientsUseCase",
]
