from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Tenant


class ITenantRepository(ABC):
    """Tenant repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID"""
        pass

    @abstractmethod
    async def get_active_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID only if it is active"""
        pass

    @abstractmethod
    async def get_by_subdomain(self, subdomain: str) -> Optional[Tenant]:
        """Get tenant by subdomain"""
        pass

    @abstractmethod
    async def get_by_custom_domain(self, custom_domain: str) -> Optional[Tenant]:
        """Get tenant by custom domain"""
        pass

    @abstractmethod
    async def get_active_for_user(self, user_id: UUID) -> List[Tenant]:
        """Get active tenants where the user holds an active membership"""
        pass

    @abstractmethod
    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant"""
        pass

    @abstractmethod
    async def update(self, tenant: Tenant) -> Tenant:
        """Update existing tenant"""
        pass
