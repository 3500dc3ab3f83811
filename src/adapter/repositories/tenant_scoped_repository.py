import logging
from enum import Enum
from typing import Any, Generic, Iterable, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.tenant_scoped_repository import ITenantScopedRepository, Page
from src.app.services.tenant_context import TenantContextStore
from src.domain.base import TenantOwnedModel
from src.domain.errors import CrossTenantViolation, MissingTenantContext

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=TenantOwnedModel)


class ScopeMode(str, Enum):
    current = "current"
    pinned = "pinned"
    unscoped = "unscoped"


class TenantScopedRepository(ITenantScopedRepository[ModelT], Generic[ModelT]):
    """
    SQLModel repository confined to one tenant.

    Reads (get/find/list/paginate/count) filter on the current context's
    tenant when one is available and run unscoped when none is, unless
    strict_reads is set, in which case they raise MissingTenantContext.
    Creates always need a tenant and fail fast without one.

    for_tenant() and without_tenant_scope() return new repository views; the
    original instance keeps its scoping.
    """

    model: Type[ModelT]

    def __init__(
        self,
        session: AsyncSession,
        tenant_context: TenantContextStore,
        strict_reads: bool = False,
    ):
        self.session = session
        self.tenant_context = tenant_context
        self.strict_reads = strict_reads
        self.scope_mode = ScopeMode.current
        self.pinned_tenant_id: Optional[UUID] = None

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    # -- scoping ---------------------------------------------------------

    def _clone(self, scope_mode: ScopeMode, pinned_tenant_id: Optional[UUID] = None):
        view = type(self)(self.session, self.tenant_context, self.strict_reads)
        view.scope_mode = scope_mode
        view.pinned_tenant_id = pinned_tenant_id
        return view

    def _read_tenant_id(self) -> Optional[UUID]:
        if self.scope_mode == ScopeMode.unscoped:
            return None
        if self.scope_mode == ScopeMode.pinned:
            return self.pinned_tenant_id

        tenant_id = self.tenant_context.get_current_tenant_id()
        if tenant_id is None and self.strict_reads:
            raise MissingTenantContext(
                f"Cannot query {self.entity_name} without tenant context. "
                "Use for_tenant() or without_tenant_scope() for cross-tenant access."
            )
        return tenant_id

    def _scoped(self, stmt):
        tenant_id = self._read_tenant_id()
        if tenant_id is not None:
            stmt = stmt.where(self.model.tenant_id == tenant_id)
        return stmt

    def _filtered(self, stmt, filters: dict):
        for name, value in filters.items():
            stmt = stmt.where(getattr(self.model, name) == value)
        return stmt

    def _stamp(self, entity: ModelT) -> None:
        if self.scope_mode == ScopeMode.pinned:
            if entity.tenant_id is None:
                entity.tenant_id = self.pinned_tenant_id
            elif entity.tenant_id != self.pinned_tenant_id:
                raise CrossTenantViolation(
                    self.entity_name, "create", self.pinned_tenant_id, entity.tenant_id
                )
            return

        if entity.tenant_id is None:
            entity.tenant_id = self.tenant_context.assert_tenant_id()

    def _guard_write(self, entity: ModelT, operation: str) -> None:
        if self.scope_mode == ScopeMode.unscoped:
            return
        if self.scope_mode == ScopeMode.pinned:
            current = self.pinned_tenant_id
        else:
            current = self.tenant_context.get_current_tenant_id()

        if current is not None and entity.tenant_id is not None and entity.tenant_id != current:
            logger.warning(
                "Blocked cross-tenant %s on %s: current=%s record=%s",
                operation,
                self.entity_name,
                current,
                entity.tenant_id,
            )
            raise CrossTenantViolation(self.entity_name, operation, current, entity.tenant_id)

    # -- reads -------------------------------------------------------------

    async def get_by_id(self, entity_id: UUID) -> Optional[ModelT]:
        stmt = self._scoped(select(self.model).where(self.model.id == entity_id))
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_many(self, entity_ids: Iterable[UUID]) -> List[ModelT]:
        ids = list(entity_ids)
        if not ids:
            return []
        stmt = self._scoped(select(self.model).where(self.model.id.in_(ids)))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_by(self, **filters: Any) -> Optional[ModelT]:
        stmt = self._filtered(self._scoped(select(self.model)), filters)
        result = await self.session.execute(stmt.limit(1))
        return result.scalars().first()

    async def list(
        self, limit: Optional[int] = None, offset: int = 0, **filters: Any
    ) -> List[ModelT]:
        stmt = self._filtered(self._scoped(select(self.model)), filters)
        stmt = stmt.order_by(self.model.created_at.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self, **filters: Any) -> int:
        stmt = self._filtered(
            self._scoped(select(func.count()).select_from(self.model)), filters
        )
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def paginate(self, page: int = 1, per_page: int = 20, **filters: Any) -> Page[ModelT]:
        page = max(page, 1)
        total = await self.count(**filters)
        items = await self.list(limit=per_page, offset=(page - 1) * per_page, **filters)
        return Page(items=items, total=total, page=page, per_page=per_page)

    # -- writes ------------------------------------------------------------

    async def create(self, entity: ModelT) -> ModelT:
        self._stamp(entity)
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        self._guard_write(entity, "update")
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: ModelT) -> None:
        self._guard_write(entity, "delete")
        await self.session.delete(entity)
        await self.session.flush()

    async def _delete_where(self, *conditions) -> int:
        stmt = self._scoped(delete(self.model))
        for condition in conditions:
            stmt = stmt.where(condition)
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    # -- escape hatches ----------------------------------------------------

    def for_tenant(self, tenant_id: UUID) -> "TenantScopedRepository[ModelT]":
        logger.warning(
            "Explicit tenant scope on %s: tenant=%s (context tenant=%s)",
            self.entity_name,
            tenant_id,
            self.tenant_context.get_current_tenant_id(),
        )
        return self._clone(ScopeMode.pinned, tenant_id)

    def without_tenant_scope(self) -> "TenantScopedRepository[ModelT]":
        logger.warning(
            "Tenant scope disabled on %s (context tenant=%s, user=%s)",
            self.entity_name,
            self.tenant_context.get_current_tenant_id(),
            self.tenant_context.get_current_user_id(),
        )
        return self._clone(ScopeMode.unscoped)

    async def find_unscoped(self, entity_id: UUID) -> Optional[ModelT]:
        return await self.without_tenant_scope().get_by_id(entity_id)

    async def query_across_tenants(
        self,
        tenant_ids: Optional[List[UUID]] = None,
        limit: Optional[int] = None,
        **filters: Any,
    ) -> List[ModelT]:
        unscoped = self.without_tenant_scope()
        stmt = unscoped._filtered(select(self.model), filters)
        if tenant_ids is not None:
            stmt = stmt.where(self.model.tenant_id.in_(tenant_ids))
        stmt = stmt.order_by(self.model.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
