from abc import ABC, abstractmethod

from src.app.repositories.audit_log_repository import IAuditLogRepository
from src.app.repositories.case_event_repository import ICaseEventRepository
from src.app.repositories.case_repository import ICaseRepository
from src.app.repositories.client_repository import IClientRepository
from src.app.repositories.deadline_repository import IDeadlineRepository
from src.app.repositories.document_repository import IDocumentRepository
from src.app.repositories.membership_repository import IMembershipRepository
from src.app.repositories.permission_repository import IPermissionRepository
from src.app.repositories.role_repository import IRoleRepository
from src.app.repositories.tenant_repository import ITenantRepository
from src.app.repositories.time_entry_repository import ITimeEntryRepository
from src.app.repositories.user_repository import IUserRepository
from src.app.services.tenant_context import TenantContextStore


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    tenant_context: TenantContextStore

    # Global repositories (initialized in __aenter__)
    users: IUserRepository
    tenants: ITenantRepository
    memberships: IMembershipRepository

    # Tenant-scoped repositories (initialized in __aenter__)
    clients: IClientRepository
    cases: ICaseRepository
    case_events: ICaseEventRepository
    deadlines: IDeadlineRepository
    documents: IDocumentRepository
    time_entries: ITimeEntryRepository
    roles: IRoleRepository
    permissions: IPermissionRepository
    audit_logs: IAuditLogRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
