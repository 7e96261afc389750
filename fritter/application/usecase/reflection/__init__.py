"""Reflection use cases."""

from .create_reflection import (
    CreateReflectionRequest,
    CreateReflectionResponse,
    CreateReflectionUseCase,
)
from .delete_reflection import (
    DeleteReflectionRequest,
    DeleteReflectionResponse,
    DeleteReflectionUseCase,
)
from .list_reflections import (
    ListReflectionsRequest,
    ListReflectionsResponse,
    ListReflectionsUseCase,
    ReflectionItem,
)
from .update_reflection import (
    UpdateReflectionRequest,
    UpdateReflectionResponse,
    UpdateReflectionUseCase,
)

__all__ = [
    "CreateReflectionRequest",
    "CreateReflectionResponse",
    "CreateReflectionUseCase",
    "DeleteReflectionRequest",
    "DeleteReflectionResponse",
    "DeleteReflectionUseCase",
    "ListReflectionsRequest",
    "ListReflectionsResponse",
    "ListReflectionsUseCase",
    "ReflectionItem",
    "UpdateReflectionRequest",
    "UpdateReflectionResponse",
    "UpdateReflectionUseCase",
]
