"""Pagination value objects.

Keep the offset/page math here so list endpoints don't re-implement it
differently.
"""
from dataclasses import dataclass
from typing import Optional

from shared.core.exceptions import InvalidArgumentException


def _validate(page: int, limit: int, total: Optional[int] = None) -> None:
    if limit < 1:
        raise InvalidArgumentException("limit", "must be >= 1", limit)
    if page < 1:
        raise InvalidArgumentException("page", "must be >= 1", page)
    if total is not None and total < 0:
        raise InvalidArgumentException("total", "must be >= 0", total)


@dataclass(frozen=True)
class PaginationMeta:
    """Metadados de paginação devolvidos ao cliente."""
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    def to_dict(self) -> dict:
        """Serializa com as chaves camelCase esperadas pelo front-end."""
        return {
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "totalPages": self.total_pages,
            "hasNext": self.has_next,
            "hasPrev": self.has_prev,
        }


@dataclass(frozen=True)
class PaginationResult:
    """Offset/limit para a query mais os metadados da página."""
    skip: int
    take: int
    meta: PaginationMeta


def calculate_pagination(page: int, limit: int, total: int) -> PaginationMeta:
    """Calcula apenas os metadados de paginação.

    Raises:
        InvalidArgumentException: se page < 1, limit < 1 ou total < 0
    """
    _validate(page, limit, total)

    # ceil(total / limit) sem passar por float
    total_pages = -(-total // limit)

    return PaginationMeta(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )


def compute_pagination(page: int, limit: int, total: int) -> PaginationResult:
    """Converte (page, limit, total) em skip/take e metadados."""
    meta = calculate_pagination(page, limit, total)
    return PaginationResult(
        skip=(page - 1) * limit,
        take=limit,
        meta=meta,
    )


@dataclass(frozen=True)
class PageRequest:
    """Requisição de paginação."""
    page: int = 1
    limit: int = 20

    def __post_init__(self):
        _validate(self.page, self.limit)

    @property
    def offset(self) -> int:
        """Calcula offset para a query."""
        return (self.page - 1) * self.limit

    @property
    def skip(self) -> int:
        return self.offset

    @property
    def take(self) -> int:
        return self.limit

    def paginate(self, total: int) -> PaginationResult:
        """Aplica o total informado pelo store e devolve skip/take + meta."""
        return compute_pagination(self.page, self.limit, total)
