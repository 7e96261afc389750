"""Freet use cases."""

from .create_freet import CreateFreetRequest, CreateFreetUseCase
from .delete_freet import DeleteFreetRequest, DeleteFreetResponse, DeleteFreetUseCase
from .get_freet import FreetItem, GetFreetRequest, GetFreetUseCase
from .list_freets import ListFreetsRequest, ListFreetsResponse, ListFreetsUseCase
from .update_freet import UpdateFreetRequest, UpdateFreetUseCase

__all__ = [
    "CreateFreetRequest",
    "CreateFreetUseCase",
    "DeleteFreetRequest",
    "DeleteFreetResponse",
    "DeleteFreetUseCase",
    "FreetItem",
    "GetFreetRequest",
    "GetFreetUseCase",
    "ListFreetsRequest",
    "ListFreetsResponse",
    "ListFreetsUseCase",
    "UpdateFreetRequest",
    "UpdateFreetUseCase",
]
