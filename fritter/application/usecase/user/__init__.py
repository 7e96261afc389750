"""User use cases."""

from .delete_account import (
    DeleteAccountRequest,
    DeleteAccountResponse,
    DeleteAccountUseCase,
)

__all__ = [
    "DeleteAccountRequest",
    "DeleteAccountResponse",
    "DeleteAccountUseCase",
]
