"""
Tenant Context Store

Holds "which tenant am I operating as" for one logical request. The value
lives in a ContextVar, so it follows the request through awaits, tasks
spawned with asyncio.create_task and callbacks scheduled with
loop.call_soon, while staying invisible to sibling requests interleaved on
the same event loop (each asyncio Task runs in its own copy of the context).

One store is constructed per process and handed out through dependency
injection; tests construct their own.
"""

import inspect
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Iterator, Optional, TypeVar, Union
from uuid import UUID

from src.domain.entities import Membership, Tenant
from src.domain.errors import MissingTenantContext

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class TenantContext:
    """Ephemeral tenant identity for one request's dynamic extent."""

    tenant_id: UUID
    tenant: Optional[Tenant] = None
    user_id: Optional[UUID] = None
    membership: Optional[Membership] = None

    def __post_init__(self):
        if not self.tenant_id:
            raise ValueError("tenant_id must not be empty")

    def __repr__(self) -> str:
        return f"TenantContext(tenant={self.tenant_id!r}, user={self.user_id!r})"


class TenantContextStore:
    """
    Request-scoped tenant context with continuation-local semantics.

    Args:
        fallback_tenant_id: Called by get_current_tenant_id() when no
            context is active. Wired to the inbound request's tenant header
            so code paths outside the structured entry point still resolve.
    """

    def __init__(
        self,
        fallback_tenant_id: Optional[Callable[[], Optional[UUID]]] = None,
        name: str = "tenant_context",
    ):
        self._var: ContextVar[Optional[TenantContext]] = ContextVar(name, default=None)
        self._fallback_tenant_id = fallback_tenant_id

    async def run(
        self,
        context: TenantContext,
        body: Callable[..., Union[Awaitable[T], T]],
        /,
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """
        Execute body with context active for its whole dynamic extent.

        body may be a coroutine function or a plain callable. The enclosing
        context (or none) is restored on exit, normal or exceptional.
        """
        token = self._var.set(context)
        try:
            result = body(*args, **kwargs)
            if inspect.isawaitable(result):
                result = await result
            return result
        finally:
            self._var.reset(token)

    @contextmanager
    def scope(self, context: TenantContext) -> Iterator[TenantContext]:
        """Synchronous counterpart of run() for with-statement use."""
        token = self._var.set(context)
        try:
            yield context
        finally:
            self._var.reset(token)

    def get_context(self) -> Optional[TenantContext]:
        return self._var.get()

    def get_current_tenant_id(self) -> Optional[UUID]:
        """
        Tenant id of the active context, else the header fallback, else None.
        """
        context = self._var.get()
        if context is not None:
            return context.tenant_id

        if self._fallback_tenant_id is not None:
            return self._fallback_tenant_id()

        return None

    def get_current_tenant(self) -> Optional[Tenant]:
        context = self._var.get()
        return context.tenant if context else None

    def get_current_user_id(self) -> Optional[UUID]:
        context = self._var.get()
        return context.user_id if context else None

    def get_current_membership(self) -> Optional[Membership]:
        context = self._var.get()
        return context.membership if context else None

    def has_context(self) -> bool:
        return self._var.get() is not None

    def assert_context(self) -> TenantContext:
        context = self._var.get()
        if context is None:
            raise MissingTenantContext("No tenant context available")
        return context

    def assert_tenant_id(self) -> UUID:
        tenant_id = self.get_current_tenant_id()
        if tenant_id is None:
            raise MissingTenantContext()
        return tenant_id

    async def run_as(
        self,
        tenant_id: UUID,
        body: Callable[..., Union[Awaitable[T], T]],
        /,
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """
        Run body as another tenant, keeping the current actor.

        Used by administrative flows that must act inside tenant B while
        serving a request bound to tenant A; the outer context is restored
        afterwards.
        """
        current = self._var.get()
        if current is not None:
            context = replace(current, tenant_id=tenant_id, tenant=None, membership=None)
        else:
            context = TenantContext(tenant_id=tenant_id)
        logger.warning(
            "Switching tenant context %s -> %s",
            current.tenant_id if current else None,
            tenant_id,
        )
        return await self.run(context, body, *args, **kwargs)
