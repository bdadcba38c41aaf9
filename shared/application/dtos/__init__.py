"""Shared DTOs."""
from .base_dto import BaseDTO, PaginationMetaDTO, PaginatedDTO

__all__ = [
    "BaseDTO",
    "PaginationMetaDTO",
    "PaginatedDTO",
]
