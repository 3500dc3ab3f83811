"""Case use cases."""

from .create_case_use_case import CreateCaseUseCase
from .dtos import CaseListResponse, CaseResponse, CreateCaseCommand
from .get_case_use_case import GetCaseUseCase
from .list_cases_use_case import ListCasesUseCase

__all__ = [
    "CreateCaseUseCase",
    "GetCaseUseCase",
    "ListCasesUseCase",
    "CaseListResponse",
    "CaseResponse",
    "CreateCaseCommand",
]
