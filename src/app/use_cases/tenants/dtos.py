"""
Tenant Use Case DTOs (Data Transfer Objects)

All Command and Response classes for tenant domain.
Provides type safety and clear contracts between layers.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities import Membership, Tenant, TenantPlan


# ============================================================================
# Command DTOs
# ============================================================================


class CreateTenantCommand(BaseModel):
    """Command for onboarding a new firm"""

    name: str = Field(..., min_length=1, max_length=255, description="Firm display name")
    subdomain: str = Field(
        ...,
        min_length=2,
        max_length=63,
        pattern=r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?$",
        description="Lowercase DNS label used as the tenant subdomain",
    )
    custom_domain: Optional[str] = Field(default=None, max_length=255)
    plan: TenantPlan = TenantPlan.free
    limits: Optional[Dict[str, int]] = None


class UpdateTenantCommand(BaseModel):
    """Partial update of the current tenant's profile; suspension stays an admin action"""

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    subdomain: Optional[str] = Field(
        default=None,
        min_length=2,
        max_length=63,
        pattern=r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?$",
    )
    custom_domain: Optional[str] = Field(default=None, max_length=255)
    plan: Optional[TenantPlan] = None
    limits: Optional[Dict[str, int]] = None


# ============================================================================
# Response DTOs
# ============================================================================


class TenantInfo(BaseModel):
    """Tenant information"""

    id: str
    name: str
    subdomain: str
    custom_domain: Optional[str] = None
    plan: str
    is_active: bool
    limits: Optional[Dict[str, int]] = None
    trial_ends_at: Optional[str] = None
    suspended_at: Optional[str] = None
    suspended_reason: Optional[str] = None

    @classmethod
    def from_entity(cls, tenant: Tenant) -> "TenantInfo":
        return cls(
            id=str(tenant.id),
            name=tenant.name,
            subdomain=tenant.subdomain,
            custom_domain=tenant.custom_domain,
            plan=tenant.plan.value,
            is_active=tenant.is_active,
            limits=tenant.limits,
            trial_ends_at=tenant.trial_ends_at.isoformat() if tenant.trial_ends_at else None,
            suspended_at=tenant.suspended_at.isoformat() if tenant.suspended_at else None,
            suspended_reason=tenant.suspended_reason,
        )


class MembershipInfo(BaseModel):
    """Membership information of the current actor"""

    user_id: str
    role: str
    is_active: bool
    custom_permissions: Optional[Dict[str, bool]] = None

    @classmethod
    def from_entity(cls, membership: Membership) -> "MembershipInfo":
        return cls(
            user_id=str(membership.user_id),
            role=membership.role.value,
            is_active=membership.is_active,
            custom_permissions=membership.custom_permissions,
        )


class CurrentTenantResponse(BaseModel):
    tenant: TenantInfo
    membership: Optional[MembershipInfo] = None


class CreateTenantResponse(BaseModel):
    tenant: TenantInfo
    membership: MembershipInfo
    roles: List[str]
    permissions_seeded: int


class TenantListResponse(BaseModel):
    tenants: List[TenantInfo]
