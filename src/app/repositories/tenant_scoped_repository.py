from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, List, Optional, TypeVar
from uuid import UUID

ModelT = TypeVar("ModelT")


@dataclass
class Page(Generic[ModelT]):
    """One page of a paginated query"""

    items: List[ModelT] = field(default_factory=list)
    total: int = 0
    page: int = 1
    per_page: int = 20

    @property
    def last_page(self) -> int:
        if self.per_page <= 0:
            return 1
        return max(1, -(-self.total // self.per_page))

    @property
    def has_more(self) -> bool:
        return self.page < self.last_page


class ITenantScopedRepository(ABC, Generic[ModelT]):
    """
    Repository interface for tenant-owned entities - application layer

    Every read, update and delete is confined to the tenant active in the
    TenantContextStore; every create is stamped with it. Leaving that
    confinement requires one of the named escape hatches below.
    """

    @abstractmethod
    async def get_by_id(self, entity_id: UUID) -> Optional[ModelT]:
        """Get entity by ID within the current tenant"""
        pass

    @abstractmethod
    async def get_many(self, entity_ids: Iterable[UUID]) -> List[ModelT]:
        """Get the entities among entity_ids that belong to the current tenant"""
        pass

    @abstractmethod
    async def find_by(self, **filters: Any) -> Optional[ModelT]:
        """Get first entity matching column equality filters"""
        pass

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: int = 0, **filters: Any
    ) -> List[ModelT]:
        """List entities, newest first"""
        pass

    @abstractmethod
    async def paginate(self, page: int = 1, per_page: int = 20, **filters: Any) -> Page[ModelT]:
        """Paginate entities, newest first"""
        pass

    @abstractmethod
    async def count(self, **filters: Any) -> int:
        """Count entities"""
        pass

    @abstractmethod
    async def create(self, entity: ModelT) -> ModelT:
        """Create entity, stamping tenant_id from the current context when unset"""
        pass

    @abstractmethod
    async def update(self, entity: ModelT) -> ModelT:
        """Update entity; refuses records stamped with another tenant"""
        pass

    @abstractmethod
    async def delete(self, entity: ModelT) -> None:
        """Delete entity; refuses records stamped with another tenant"""
        pass

    # Escape hatches. Every call site is an isolation bypass.

    @abstractmethod
    def for_tenant(self, tenant_id: UUID) -> "ITenantScopedRepository[ModelT]":
        """Repository view pinned to an explicit tenant, ignoring the context"""
        pass

    @abstractmethod
    def without_tenant_scope(self) -> "ITenantScopedRepository[ModelT]":
        """Repository view with no tenant filtering at all (system operations)"""
        pass

    @abstractmethod
    async def find_unscoped(self, entity_id: UUID) -> Optional[ModelT]:
        """Get entity by ID in any tenant"""
        pass

    @abstractmethod
    async def query_across_tenants(
        self,
        tenant_ids: Optional[List[UUID]] = None,
        limit: Optional[int] = None,
        **filters: Any,
    ) -> List[ModelT]:
        """List entities across all tenants, or across the given tenants"""
        pass
