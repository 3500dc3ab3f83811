from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.audit_log_repository import AuditLogRepository
from src.adapter.repositories.case_event_repository import CaseEventRepository
from src.adapter.repositories.case_repository import CaseRepository
from src.adapter.repositories.client_repository import ClientRepository
from src.adapter.repositories.deadline_repository import DeadlineRepository
from src.adapter.repositories.document_repository import DocumentRepository
from src.adapter.repositories.membership_repository import MembershipRepository
from src.adapter.repositories.permission_repository import PermissionRepository
from src.adapter.repositories.role_repository import RoleRepository
from src.adapter.repositories.tenant_repository import TenantRepository
from src.adapter.repositories.time_entry_repository import TimeEntryRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.tenant_context import TenantContextStore
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(
        self,
        session: AsyncSession,
        tenant_context: TenantContextStore,
        strict_reads: bool = False,
    ):
        self.session = session
        self.tenant_context = tenant_context
        self.strict_reads = strict_reads

    async def __aenter__(self):
        # Global repositories
        self.users = UserRepository(self.session)
        self.tenants = TenantRepository(self.session)
        self.memberships = MembershipRepository(self.session)

        # Tenant-scoped repositories share the session and the context store
        scoped = (self.session, self.tenant_context, self.strict_reads)
        self.clients = ClientRepository(*scoped)
        self.cases = CaseRepository(*scoped)
        self.case_events = CaseEventRepository(*scoped)
        self.deadlines = DeadlineRepository(*scoped)
        self.documents = DocumentRepository(*scoped)
        self.time_entries = TimeEntryRepository(*scoped)
        self.roles = RoleRepository(*scoped)
        self.permissions = PermissionRepository(*scoped)
        self.audit_logs = AuditLogRepository(*scoped)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
