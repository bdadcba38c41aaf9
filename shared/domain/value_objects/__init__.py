"""Shared value objects."""
from .pagination import (
    PageRequest,
    PaginationMeta,
    PaginationResult,
    calculate_pagination,
    compute_pagination,
)

__all__ = [
    "PageRequest",
    "PaginationMeta",
    "PaginationResult",
    "calculate_pagination",
    "compute_pagination",
]
