"""Client use cases."""

from .create_client_use_case import CreateClientUseCase
from .delete_client_use_case import DeleteClientUseCase
from .dtos import ClientListResponse, ClientResponse, CreateClientCommand, UpdateClientCommand
from .get_client_use_case import GetClientUseCase
from .list_clients_use_case import ListClientsUseCase
from .update_client_use_case import UpdateClientUseCase

__all__ = [
    "CreateClientUseCase",
    "DeleteClientUseCase",
    "GetClientUseCase",
    "ListClientsUseCase",
    "UpdateClientUseCase",
    "ClientListResponse",
    "ClientResponse",
    "CreateClientCommand",
    "UpdateClientCommand",
]
