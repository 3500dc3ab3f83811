"""Dashboard use cases."""

from .dtos import DashboardResponse
from .get_dashboard_use_case import GetDashboardUseCase

__all__ = [
    "DashboardResponse",
    "GetDashboardUseCase",
]
