"""Base DTOs for application layer."""
from typing import TypeVar, Generic, Sequence
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from shared.domain.value_objects.pagination import PaginationMeta, calculate_pagination

T = TypeVar('T')


class BaseDTO(BaseModel):
    """Base DTO com configurações padrão (JSON em camelCase)."""
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class PaginationMetaDTO(BaseDTO):
    """DTO dos metadados de paginação."""
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_meta(cls, meta: PaginationMeta) -> "PaginationMetaDTO":
        """Cria o DTO a partir do value object."""
        return cls(
            page=meta.page,
            limit=meta.limit,
            total=meta.total,
            total_pages=meta.total_pages,
            has_next=meta.has_next,
            has_prev=meta.has_prev,
        )


class PaginatedDTO(BaseDTO, Generic[T]):
    """DTO para respostas paginadas."""
    items: Sequence[T]
    pagination: PaginationMetaDTO

    @classmethod
    def from_page(cls, items: Sequence[T], page: int, limit: int, total: int) -> "PaginatedDTO[T]":
        """Cria PaginatedDTO a partir de parâmetros."""
        meta = calculate_pagination(page, limit, total)
        return cls(items=items, pagination=PaginationMetaDTO.from_meta(meta))
