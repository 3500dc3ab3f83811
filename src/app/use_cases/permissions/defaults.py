"""
Default permission catalogue and role mapping seeded into every new tenant.
"""

from typing import Dict, List, Tuple

from src.domain.entities import MembershipRole

CRUD_ACTIONS = ("create", "read", "update", "delete", "list")

PRACTICE_RESOURCES = ("clients", "cases", "documents", "deadlines", "time_entries")

DEFAULT_PERMISSIONS: List[Tuple[str, str]] = (
    [(resource, action) for resource in PRACTICE_RESOURCES for action in CRUD_ACTIONS]
    + [("roles", action) for action in CRUD_ACTIONS + ("assign", "revoke")]
    + [("permissions", action) for action in CRUD_ACTIONS + ("assign", "revoke")]
    + [("audit", "read"), ("audit", "list")]
    + [("settings", "read"), ("settings", "update")]
)

DEFAULT_ROLES: List[Dict[str, str]] = [
    {
        "name": "Owner",
        "slug": MembershipRole.owner.value,
        "description": "Firm owner with every permission",
    },
    {
        "name": "Admin",
        "slug": MembershipRole.admin.value,
        "description": "Administrator with all permissions except permission management",
    },
    {
        "name": "Lawyer",
        "slug": MembershipRole.lawyer.value,
        "description": "Full access to clients, cases and their records",
    },
    {
        "name": "Assistant",
        "slug": MembershipRole.assistant.value,
        "description": "Read access to practice records and basic data entry",
    },
]


def permissions_for_role(slug: str) -> List[Tuple[str, str]]:
    """(resource, action) pairs granted to a default role"""
    if slug == MembershipRole.owner.value:
        return list(DEFAULT_PERMISSIONS)

    if slug == MembershipRole.admin.value:
        return [pair for pair in DEFAULT_PERMISSIONS if pair[0] != "permissions"]

    if slug == MembershipRole.lawyer.value:
        return [
            pair for pair in DEFAULT_PERMISSIONS if pair[0] in PRACTICE_RESOURCES
        ] + [("settings", "read")]

    if slug == MembershipRole.assistant.value:
        return [
            (resource, action)
            for resource, action in DEFAULT_PERMISSIONS
            if resource in PRACTICE_RESOURCES and action in ("read", "list")
        ] + [("documents", "create"), ("time_entries", "create")]

    return []
