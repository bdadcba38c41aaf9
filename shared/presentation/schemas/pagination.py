"""Pagination query schema."""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from shared.domain.value_objects.pagination import PageRequest
from shared.infrastructure.config.settings import get_settings


class PaginationQuery(BaseModel):
    """Parâmetros de paginação vindos da query string.

    Valores chegam como string (``?page=2&limit=50``) e são convertidos
    para inteiros antes da validação.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        str_strip_whitespace=True,
    )

    page: int = Field(default=1, ge=1)
    limit: int = Field(default_factory=lambda: get_settings().default_page_size, ge=1)
    sort_by: Optional[str] = None
    sort_order: Literal["asc", "desc"] = "desc"
    search: Optional[str] = None

    @field_validator("limit")
    @classmethod
    def limit_within_max(cls, value: int) -> int:
        max_page_size = get_settings().max_page_size
        if value > max_page_size:
            raise ValueError(f"limit must be <= {max_page_size}")
        return value

    @field_validator("search")
    @classmethod
    def empty_search_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    def to_page_request(self) -> PageRequest:
        """Converte para o value object usado pela camada de domínio."""
        return PageRequest(page=self.page, limit=self.limit)
