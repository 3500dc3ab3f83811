"""Role use cases."""

from .assign_roles_use_case import AssignRolesUseCase
from .list_roles_use_case import ListRolesUseCase

__all__ = [
    "AssignRolesUseCase",
    "ListRolesUseCase",
]
