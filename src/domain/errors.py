"""
Domain Errors

Every error carries a stable machine-readable code and a human-readable
message. The API layer maps each class to an HTTP status.
"""

from typing import Any, Dict, List, Optional


class DomainError(Exception):
    code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


class MissingTenantContext(DomainError):
    """No tenant is active for an operation that requires one."""

    code = "MISSING_TENANT_CONTEXT"

    def __init__(self, message: str = "No tenant ID in current context"):
        super().__init__(message)


class TenantRequired(DomainError):
    """Resolution could not determine any tenant for the request."""

    code = "TENANT_REQUIRED"

    def __init__(
        self,
        message: str = "Tenant not specified. Provide the tenant header or use a tenant subdomain.",
    ):
        super().__init__(message)


class TenantNotFound(DomainError):
    code = "TENANT_NOT_FOUND"

    def __init__(self, message: str = "Tenant not found or inactive"):
        super().__init__(message)


class TenantMembershipForbidden(DomainError):
    """Authenticated caller has no active membership in the resolved tenant."""

    code = "TENANT_ACCESS_FORBIDDEN"

    def __init__(self, message: str = "You do not have access to this tenant"):
        super().__init__(message)


class PermissionDenied(DomainError):
    code = "PERMISSION_DENIED"

    def __init__(self, required_permissions: List[str]):
        self.required_permissions = list(required_permissions)
        super().__init__(
            "Insufficient permissions. Required: " + ", ".join(self.required_permissions)
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["required_permissions"] = self.required_permissions
        return data


class CrossTenantViolation(DomainError):
    """A write targeted a record stamped with another tenant."""

    code = "CROSS_TENANT_VIOLATION"

    def __init__(self, entity_name: str, operation: str, current_tenant, record_tenant):
        self.entity_name = entity_name
        self.operation = operation
        super().__init__(
            f"Cannot {operation} {entity_name} from different tenant. "
            f"Current tenant: {current_tenant}, record tenant: {record_tenant}"
        )


class EntityNotFound(DomainError):
    def __init__(self, entity_name: str, entity_id: Any = None):
        code = f"{entity_name.upper()}_NOT_FOUND"
        label = entity_name.replace("_", " ").capitalize()
        message = f"{label} not found" if entity_id is None else f"{label} {entity_id} not found"
        super().__init__(message, code=code)


class Conflict(DomainError):
    code = "CONFLICT"
